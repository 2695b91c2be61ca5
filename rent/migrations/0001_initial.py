# Generated manually for the initial RentProof schema

from django.db import migrations, models
import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('tenants', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='RentProof',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('month', models.CharField(help_text="e.g., 'January'", max_length=10)),
                ('year', models.PositiveSmallIntegerField()),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('proof_url', models.URLField(help_text='Uploaded payment proof', max_length=500)),
                ('status', models.CharField(choices=[('Pending', 'Pending'), ('Approved', 'Approved'), ('Rejected', 'Rejected')], default='Pending', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tenant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='rent_proofs', to='tenants.tenant')),
            ],
            options={
                'verbose_name': 'Rent Proof',
                'verbose_name_plural': 'Rent Proofs',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['month', 'year'], name='rentproof_period_idx'),
                    models.Index(fields=['tenant', 'status'], name='rentproof_tenant_status_idx'),
                ],
            },
        ),
    ]
