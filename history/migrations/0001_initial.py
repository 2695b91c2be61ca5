# Generated manually for the past-tenant archive

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='PastTenant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('original_id', models.CharField(help_text='ID of the tenant record before checkout', max_length=64)),
                ('name', models.CharField(max_length=255)),
                ('email', models.EmailField(max_length=254)),
                ('phone', models.CharField(max_length=15)),
                ('room_no', models.CharField(blank=True, max_length=10)),
                ('id_type', models.CharField(blank=True, max_length=10)),
                ('id_number', models.CharField(blank=True, max_length=50)),
                ('id_proof', models.URLField(blank=True, max_length=500)),
                ('profile_photo', models.URLField(blank=True, max_length=500)),
                ('joined_at', models.DateTimeField(blank=True, null=True)),
                ('left_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('deposit', models.DecimalField(decimal_places=2, default=0, max_digits=10)),
                ('reason_for_leaving', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Past Tenant',
                'verbose_name_plural': 'Past Tenants',
                'ordering': ['-left_at'],
                'indexes': [
                    models.Index(fields=['left_at'], name='pasttenant_left_idx'),
                    models.Index(fields=['original_id'], name='pasttenant_original_idx'),
                ],
            },
        ),
    ]
