# Generated manually for the initial Bill schema

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
            name='Bill',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('room_no', models.CharField(help_text='Room at the time the bill was raised', max_length=10)),
                ('month', models.CharField(help_text="e.g., 'January'", max_length=10)),
                ('year', models.PositiveSmallIntegerField()),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('type', models.CharField(choices=[('Rent', 'Rent'), ('Electricity', 'Electricity')], default='Rent', max_length=20)),
                ('status', models.CharField(choices=[('Unpaid', 'Unpaid'), ('Paid', 'Paid')], default='Unpaid', max_length=10)),
                ('due_date', models.DateField()),
                ('transaction_ref', models.CharField(blank=True, max_length=100)),
                ('paid_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('tenant', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='bills', to='tenants.tenant')),
            ],
            options={
                'verbose_name': 'Bill',
                'verbose_name_plural': 'Bills',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['month', 'year'], name='bill_period_idx'),
                    models.Index(fields=['tenant', 'status'], name='bill_tenant_status_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('tenant', 'month', 'year', 'type'), name='unique_bill_per_tenant_period_type'),
                ],
            },
        ),
    ]
