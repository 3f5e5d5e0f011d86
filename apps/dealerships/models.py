from itertools import count

from django.conf import settings
from django.db import models
from django.utils.text import slugify


class DealershipQuerySet(models.QuerySet):
    def accessible_by(self, user):
        """Dealerships the user may work in. Superusers may use any of them."""
        if not user.is_authenticated:
            return self.none()
        if user.is_superuser:
            return self
        return self.filter(memberships__user=user)

    def default_for(self, user):
        """
        The user's own first dealership; superusers without a membership
        fall back to the oldest dealership.
        """
        own = self.filter(memberships__user=user).order_by("pk").first()
        if own is None and user.is_superuser:
            own = self.order_by("pk").first()
        return own


class Dealership(models.Model):
    name = models.CharField(max_length=150, unique=True)
    slug = models.SlugField(max_length=160, unique=True, blank=True)

    # Business details printed on sale and purchase paperwork
    phone = models.CharField(max_length=40, blank=True)
    email = models.EmailField(blank=True)
    address = models.CharField(max_length=255, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = DealershipQuerySet.as_manager()

    def _unique_slug(self) -> str:
        base = slugify(self.name)[:150] or "dealership"
        taken = Dealership.objects.exclude(pk=self.pk)
        for n in count(1):
            candidate = base if n == 1 else f"{base}-{n}"
            if not taken.filter(slug=candidate).exists():
                return candidate

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def role_of(self, user) -> str | None:
        m = self.memberships.filter(user=user).only("role").first()
        return m.role if m else None

    def __str__(self):
        return self.name


class DealershipMembership(models.Model):
    ROLE_ADMIN = "admin"
    ROLE_USER = "user"
    ROLE_CHOICES = [
        (ROLE_ADMIN, "Admin"),
        (ROLE_USER, "User"),
    ]

    dealership = models.ForeignKey(Dealership, on_delete=models.CASCADE, related_name="memberships")
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="dealership_memberships")
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_USER)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        unique_together = ("dealership", "user")

    def __str__(self):
        return f"{self.user} @ {self.dealership} ({self.role})"
