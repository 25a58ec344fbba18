"""
Django Admin configuration for the tracker.
"""

from django.contrib import admin

from tracker.models import Bug, Comment, Environment, Membership, Project, User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["username", "email", "first_name", "last_name", "date_joined"]
    search_fields = ["username", "email", "first_name", "last_name"]
    list_filter = ["is_active", "is_staff", "is_superuser"]


class MembershipInline(admin.TabularInline):
    model = Membership
    extra = 0


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ["name", "slug", "owner", "created_at"]
    search_fields = ["name", "slug"]
    prepopulated_fields = {"slug": ["name"]}
    inlines = [MembershipInline]


@admin.register(Environment)
class EnvironmentAdmin(admin.ModelAdmin):
    list_display = ["name", "project", "created_at"]
    search_fields = ["name", "project__name"]


@admin.register(Bug)
class BugAdmin(admin.ModelAdmin):
    list_display = [
        "number",
        "class_name",
        "environment",
        "occurrences_count",
        "latest_occurrence",
        "fixed",
        "irrelevant",
    ]
    search_fields = ["class_name", "message"]
    list_filter = ["fixed", "irrelevant"]


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ["number", "bug", "user", "created_at"]
    search_fields = ["body"]
