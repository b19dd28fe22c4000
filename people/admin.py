# people/admin.py
"""
Admin configuration for the people application.
"""

from django.contrib import admin
from .models import Person


@admin.register(Person)
class PersonAdmin(admin.ModelAdmin):
    """
    Admin configuration for the Person model.

    Attributes
    ----------
    list_display : tuple
        The user, nickname, gender and birthday.
    list_filter : tuple
        Gender, to spot people the census cannot count.
    search_fields : tuple
        Username, names, nickname and e-mail.
    """

    list_display = ("user", "nickname", "gender", "birthday", "town")
    list_filter = ("gender",)
    search_fields = (
        "user__username",
        "user__first_name",
        "user__last_name",
        "user__email",
        "nickname",
    )
