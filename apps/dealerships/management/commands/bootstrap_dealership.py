import logging
import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.dealerships.models import Dealership, DealershipMembership

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Create the first dealership and its admin user if they do not exist yet."

    def add_arguments(self, parser):
        parser.add_argument("--name", default=os.getenv("BOOTSTRAP_DEALERSHIP_NAME", "My Car Yard"))
        parser.add_argument("--username", default=os.getenv("BOOTSTRAP_ADMIN_USERNAME", "admin"))
        parser.add_argument("--email", default=os.getenv("BOOTSTRAP_ADMIN_EMAIL", "admin@carsales.local"))
        parser.add_argument("--password", default=os.getenv("BOOTSTRAP_ADMIN_PASSWORD", "admin123"))

    def handle(self, *args, **opts):
        User = get_user_model()

        with transaction.atomic():
            dealership, created_dealership = Dealership.objects.get_or_create(name=opts["name"])

            user = User.objects.filter(username=opts["username"]).first()
            created_user = user is None
            if created_user:
                user = User.objects.create_user(
                    username=opts["username"],
                    email=opts["email"],
                    password=opts["password"],
                )

            DealershipMembership.objects.get_or_create(
                dealership=dealership,
                user=user,
                defaults={"role": DealershipMembership.ROLE_ADMIN},
            )

        if created_dealership:
            self.stdout.write(self.style.SUCCESS(f"Dealership '{dealership.name}' created."))
        if created_user:
            self.stdout.write(self.style.SUCCESS(f"Admin user '{user.username}' created."))
            logger.warning("Default admin user created; change its password", extra={"username": user.username})
        if not created_dealership and not created_user:
            self.stdout.write("Nothing to do.")
