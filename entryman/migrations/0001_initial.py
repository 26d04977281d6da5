"""
Initial migration for Entryman models.
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Entryman models: Batch, Entry."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Batch',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.CharField(db_index=True, max_length=64, verbose_name='ID do Produto')),
                ('product_name', models.CharField(help_text='Cópia do nome no momento da criação do lote', max_length=200, verbose_name='Nome do Produto')),
                ('batch_number', models.CharField(max_length=50, verbose_name='Número do Lote')),
                ('stock', models.PositiveIntegerField(default=0, verbose_name='Estoque')),
                ('expiry_date', models.DateField(db_index=True, help_text='Último dia em que o lote pode ser utilizado', verbose_name='Data de Validade')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
            ],
            options={
                'verbose_name': 'Lote',
                'verbose_name_plural': 'Lotes',
                'ordering': ['expiry_date', 'batch_number'],
            },
        ),
        migrations.CreateModel(
            name='Entry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('product_id', models.CharField(db_index=True, max_length=64, verbose_name='ID do Produto')),
                ('product_name', models.CharField(max_length=200, verbose_name='Nome do Produto')),
                ('batch_number', models.CharField(max_length=50, verbose_name='Número do Lote')),
                ('quantity', models.PositiveIntegerField(verbose_name='Quantidade')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Criado em')),
            ],
            options={
                'verbose_name': 'Entrada',
                'verbose_name_plural': 'Entradas',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='batch',
            constraint=models.UniqueConstraint(fields=('product_id', 'batch_number'), name='unique_batch_per_product'),
        ),
        migrations.AddIndex(
            model_name='entry',
            index=models.Index(fields=['product_id', 'batch_number'], name='entryman_en_product_5c1f2a_idx'),
        ),
    ]
