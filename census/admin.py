# census/admin.py
"""
Admin configuration for the census application.
"""

from django.contrib import admin

from .models import Census, MemberCount


@admin.register(Census)
class CensusAdmin(admin.ModelAdmin):
    list_display = ("year", "start_at", "finish_at")


@admin.register(MemberCount)
class MemberCountAdmin(admin.ModelAdmin):
    """
    Admin configuration for the MemberCount model.

    Attributes
    ----------
    list_display : tuple
        Abteilung, year, year of birth and the totals.
    list_filter : tuple
        Filter by census year.
    """

    list_display = ("abteilung", "kantonalverband", "year", "born_in", "f", "m")
    list_filter = ("year",)
    search_fields = ("abteilung__name",)
