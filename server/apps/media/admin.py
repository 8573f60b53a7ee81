"""Django admin configuration for media app."""

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from server.apps.media.models import Media, Mediable


class MediableInline(admin.TabularInline):
    """Read-only list of objects a media file is attached to."""

    model = Mediable
    extra = 0
    can_delete = False
    readonly_fields = ['content_type', 'object_id', 'tag', 'created_at']

    def has_add_permission(
        self,
        request: HttpRequest,
        obj: Media | None = None,
    ) -> bool:
        """Attachments are managed by the owning objects."""
        return False


@admin.register(Media)
class MediaAdmin(admin.ModelAdmin[Media]):
    """Admin interface for Media model.

    Everything is read-only: locations change only through
    ``move_media`` so the disk and the record stay in sync.
    """

    list_display = [
        'basename_display',
        'disk',
        'directory',
        'aggregate_type',
        'size_display',
        'mime_type',
        'created_at',
    ]

    list_filter = [
        'disk',
        'aggregate_type',
        'created_at',
    ]

    search_fields = [
        'directory',
        'filename',
        'extension',
    ]

    readonly_fields = [
        'disk',
        'directory',
        'filename',
        'extension',
        'size',
        'mime_type',
        'aggregate_type',
        'created_at',
        'updated_at',
    ]

    fieldsets = (
        ('Location', {
            'fields': ('disk', 'directory', 'filename', 'extension'),
        }),
        ('Metadata', {
            'fields': (
                'size',
                'mime_type',
                'aggregate_type',
            ),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
        }),
    )

    inlines = [MediableInline]

    def basename_display(self, obj: Media) -> str:
        """Display filename with extension.

        Args:
            obj: Media instance.

        Returns:
            Basename without directory.
        """
        return obj.basename
    basename_display.short_description = 'File'  # type: ignore[attr-defined]

    def size_display(self, obj: Media) -> str:
        """Display file size in human-readable format.

        Args:
            obj: Media instance.

        Returns:
            Formatted size string (e.g., '1.5 MB', '234 KB').
        """
        return obj.readable_size()
    size_display.short_description = 'Size'  # type: ignore[attr-defined]

    def has_add_permission(self, request: HttpRequest) -> bool:
        """Media records are created by the ingestion process only."""
        return False

    def get_queryset(self, request: HttpRequest) -> QuerySet[Media]:
        """Optimize queryset with prefetched attachments.

        Args:
            request: HTTP request.

        Returns:
            Optimized QuerySet.
        """
        return super().get_queryset(request).prefetch_related('attachments')
