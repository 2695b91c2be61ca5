# Generated manually to tie gateway orders to bills

from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('billing', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='bill',
            name='order_id',
            field=models.CharField(blank=True, max_length=100),
        ),
    ]
