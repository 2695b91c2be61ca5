# Generated manually for the initial Room schema

from django.db import migrations, models
import django.core.validators


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Room',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('room_no', models.CharField(help_text="e.g., '101', '305'", max_length=10, unique=True)),
                ('floor', models.PositiveSmallIntegerField()),
                ('capacity', models.PositiveSmallIntegerField(default=2, validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(2)])),
                ('current_tenants', models.JSONField(blank=True, default=list)),
                ('occupant_count', models.PositiveSmallIntegerField(default=0, editable=False)),
                ('status', models.CharField(choices=[('Vacant', 'Vacant'), ('Partially Occupied', 'Partially Occupied'), ('Occupied', 'Occupied')], default='Vacant', editable=False, max_length=20)),
                ('price', models.DecimalField(blank=True, decimal_places=2, help_text='Monthly rent. Falls back to the default room price when empty.', max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(0)])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Room',
                'verbose_name_plural': 'Rooms',
                'ordering': ['room_no'],
                'indexes': [
                    models.Index(fields=['status'], name='room_status_idx'),
                    models.Index(fields=['floor', 'room_no'], name='room_floor_idx'),
                ],
            },
        ),
    ]
