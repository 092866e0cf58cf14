from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin
from user.models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("id", "username", "email", "is_staff", "date_joined")
    list_filter = ("is_staff", "groups", "date_joined")
    search_fields = ("username", "email")
    ordering = ("-date_joined",)
