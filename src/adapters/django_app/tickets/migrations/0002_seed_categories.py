"""
Semeia as categorias de referência.
"""

from django.db import migrations

from src.core.tickets.entities import DEFAULT_CATEGORIES


def seed_categories(apps, schema_editor):
    Category = apps.get_model('tickets', 'TicketCategoryModel')
    for category_id, name, description in DEFAULT_CATEGORIES:
        Category.objects.update_or_create(
            id=category_id,
            defaults={'name': name, 'description': description, 'is_active': True},
        )


def remove_categories(apps, schema_editor):
    Category = apps.get_model('tickets', 'TicketCategoryModel')
    Category.objects.filter(id__in=[c[0] for c in DEFAULT_CATEGORIES]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('tickets', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_categories, remove_categories),
    ]
