"""
Write-path timestamping shared by every persisted entity.

``updated_at`` is never maintained by the database or by ``auto_now``; services
call :func:`touch` after each mutation so the stamp is set in exactly one place.
"""

from django.db import models
from django.utils import timezone


def touch(instance, *fields):
    """
    Stamp ``updated_at`` on a model instance and persist it.

    Args:
        instance: Model instance with an ``updated_at`` field
        *fields: Other fields changed by the caller that must be written in the
            same UPDATE statement. Ignored for unsaved instances, which are
            inserted in full.

    Returns:
        The same instance, saved.
    """
    instance.updated_at = timezone.now()
    if instance._state.adding:
        instance.save()
    else:
        update_fields = list(dict.fromkeys([*fields, "updated_at"]))
        instance.save(update_fields=update_fields)
    return instance


class TimestampedModel(models.Model):
    """Abstract base for rows that carry creation and last-write markers."""

    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        abstract = True

    def touch(self, *fields):
        return touch(self, *fields)
