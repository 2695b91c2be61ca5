# Generated manually for the initial Tenant schema

from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Tenant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(max_length=254, unique=True)),
                ('phone', models.CharField(max_length=15)),
                ('room_no', models.CharField(blank=True, max_length=10, null=True)),
                ('deposit', models.DecimalField(decimal_places=2, default=0, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('id_type', models.CharField(choices=[('aadhar', 'Aadhar'), ('pan', 'PAN'), ('voter', 'Voter ID')], max_length=10)),
                ('id_number', models.CharField(max_length=50)),
                ('id_proof', models.URLField(max_length=500)),
                ('profile_photo', models.URLField(blank=True, default='https://icon-library.com/images/anonymous-avatar-icon/anonymous-avatar-icon-25.jpg', max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='tenant_profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Tenant',
                'verbose_name_plural': 'Tenants',
                'ordering': ['room_no', 'name'],
                'indexes': [
                    models.Index(fields=['room_no'], name='tenant_room_idx'),
                    models.Index(fields=['created_at'], name='tenant_created_idx'),
                ],
            },
        ),
    ]
