"""
Soft delete (archiving) infrastructure for the FeastFlow backend.

Archiving hides a catalog row from new orders while keeping every historical
order line that references it. It is the non-destructive alternative to a hard
delete, which cascades into order history.
"""

from django.db import models
from django.utils import timezone

from .timestamps import TimestampedModel


class SoftDeleteQuerySet(models.QuerySet):
    """
    Custom QuerySet that provides soft delete functionality.
    """

    def active(self):
        """Return only active (non-archived) records."""
        return self.filter(is_active=True)

    def archived(self):
        """Return only archived records."""
        return self.filter(is_active=False)

    def archive(self):
        """
        Archive (soft delete) all records in this queryset.
        """
        now = timezone.now()
        return self.update(is_active=False, archived_at=now, updated_at=now)

    def unarchive(self):
        """
        Unarchive (restore) all records in this queryset.
        """
        return self.update(is_active=True, archived_at=None, updated_at=timezone.now())


class SoftDeleteManager(models.Manager):
    """
    Custom manager that filters out archived records by default.

    Subclasses may set queryset_class to a SoftDeleteQuerySet subclass.
    """

    queryset_class = SoftDeleteQuerySet

    def get_queryset(self):
        """Return only active records by default."""
        return self.queryset_class(self.model, using=self._db).active()

    def with_archived(self):
        """Return all records including archived ones."""
        return self.queryset_class(self.model, using=self._db)

    def archived_only(self):
        """Return only archived records."""
        return self.queryset_class(self.model, using=self._db).archived()


class SoftDeleteMixin(TimestampedModel):
    """
    Abstract base class that provides soft delete functionality.

    Models inheriting from this mixin will have:
    - is_active field to mark records as archived
    - archived_at timestamp when record was archived
    - archive() and unarchive() methods
    - Custom manager that filters archived records by default

    Unlike archive(), delete() keeps Django's default behaviour and removes
    the row together with everything that cascades from it.
    """

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Designates whether this record is active. "
                  "Inactive records are considered archived/soft-deleted."
    )

    archived_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Timestamp when this record was archived."
    )

    objects = SoftDeleteManager()
    all_objects = models.Manager()

    class Meta:
        abstract = True

    def archive(self):
        """
        Archive (soft delete) this record.
        """
        self.is_active = False
        self.archived_at = timezone.now()
        self.touch('is_active', 'archived_at')

    def unarchive(self):
        """
        Unarchive (restore) this record.
        """
        self.is_active = True
        self.archived_at = None
        self.touch('is_active', 'archived_at')

    @property
    def is_archived(self):
        """Return True if this record is archived."""
        return not self.is_active
