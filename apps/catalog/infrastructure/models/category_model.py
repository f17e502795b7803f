"""
Category Django ORM model.
"""
import uuid

from django.db import models


class CategoryModel(models.Model):
    """Storage row for the Category aggregate."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True, db_index=True)

    # Stamped by the aggregate, not by the database
    created_at = models.DateTimeField(db_index=True)

    class Meta:
        app_label = 'catalog'
        db_table = 'categories'
        ordering = ['-created_at']

    def __str__(self):
        return self.name
