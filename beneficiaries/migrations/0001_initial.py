from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Beneficiary',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.CharField(editable=False, max_length=40, unique=True)),
                ('names', models.CharField(max_length=255)),
                ('email', models.EmailField(blank=True, db_index=True, default='', max_length=254)),
                ('phone_number', models.CharField(db_index=True, max_length=32)),
                ('id_number', models.CharField(db_index=True, max_length=64)),
                ('age', models.PositiveIntegerField(blank=True, null=True)),
                ('sex', models.CharField(blank=True, db_index=True, max_length=20)),
                ('state', models.CharField(blank=True, db_index=True, max_length=100)),
                ('lga', models.CharField(db_index=True, help_text='Local government area', max_length=100)),
                ('community', models.CharField(blank=True, max_length=255)),
                ('religion', models.CharField(blank=True, max_length=50)),
                ('disability', models.CharField(blank=True, max_length=50)),
                ('physical_fitness', models.CharField(blank=True, max_length=50)),
                ('photo', models.CharField(blank=True, max_length=500)),
                ('qr_code_url', models.CharField(blank=True, max_length=500, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name_plural': 'beneficiaries',
            },
        ),
        migrations.CreateModel(
            name='MealRecord',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField(db_index=True)),
                ('breakfast', models.BooleanField(default=False)),
                ('lunch', models.BooleanField(default=False)),
                ('dinner', models.BooleanField(default=False)),
                ('beneficiary', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='meal_records', to='beneficiaries.beneficiary')),
            ],
            options={
                'ordering': ['date'],
                'unique_together': {('beneficiary', 'date')},
            },
        ),
    ]
