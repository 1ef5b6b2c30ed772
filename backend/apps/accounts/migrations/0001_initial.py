import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ClientToken',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('client', models.CharField(max_length=64, verbose_name='Идентификатор клиента')),
                ('token_digest', models.CharField(max_length=64, verbose_name='Хэш токена')),
                ('expires_at', models.DateTimeField(verbose_name='Действителен до')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='client_tokens', to=settings.AUTH_USER_MODEL, verbose_name='Пользователь')),
            ],
            options={
                'verbose_name': 'Токен клиента',
                'verbose_name_plural': 'Токены клиентов',
            },
        ),
        migrations.AddConstraint(
            model_name='clienttoken',
            constraint=models.UniqueConstraint(fields=('user', 'client'), name='unique_client_token_per_user'),
        ),
    ]
