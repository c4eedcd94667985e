from django.contrib import admin
from django.db.models import Count

from events.admin import EventAdmin
from events.models import Event
from registrations.models import Registration


class RegistrationInline(admin.TabularInline):
    model = Registration
    extra = 0
    fields = ["user", "created_at"]
    readonly_fields = ["user", "created_at"]

    def has_add_permission(self, request, obj=None):
        return False


class EventRegistrationsAdmin(EventAdmin):
    """Event admin with the attendee roster and a registration count column."""

    list_display = [*EventAdmin.list_display, "registration_count"]
    inlines = [RegistrationInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(_registration_count=Count("registrations"))

    @admin.display(description="Registrations", ordering="_registration_count")
    def registration_count(self, obj: Event) -> int:
        return obj._registration_count


admin.site.unregister(Event)
admin.site.register(Event, EventRegistrationsAdmin)


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ["event", "user", "created_at"]
    list_filter = ["event"]
    search_fields = ["event__title", "user__username", "user__email"]
    readonly_fields = ["created_at"]
    list_select_related = ["event", "user"]
