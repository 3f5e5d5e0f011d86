from django.contrib import admin
from .models import Dealership, DealershipMembership

@admin.register(Dealership)
class DealershipAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "phone", "email", "created_at")
    search_fields = ("name", "slug", "email")

@admin.register(DealershipMembership)
class DealershipMembershipAdmin(admin.ModelAdmin):
    list_display = ("dealership", "user", "role", "created_at")
    list_filter = ("role", "dealership")
    search_fields = ("dealership__name", "dealership__slug", "user__username", "user__email")
