# groups/admin.py
"""
Admin configuration for the groups application.
"""

from django.contrib import admin

from .models import Group, Role


class RoleInline(admin.TabularInline):
    model = Role
    extra = 0
    autocomplete_fields = ("person",)


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Group model.

    Attributes
    ----------
    list_display : tuple
        Name, type and parent of the group.
    list_filter : tuple
        Filter by group type.
    """

    list_display = ("name", "short_name", "group_type", "parent")
    list_filter = ("group_type",)
    search_fields = ("name", "short_name")
    inlines = [RoleInline]


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    list_display = ("person", "group", "role_type", "created_at", "deleted_at")
    list_filter = ("role_type",)
    search_fields = ("person__username", "person__last_name", "group__name")
