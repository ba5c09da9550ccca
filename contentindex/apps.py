from django.apps import AppConfig


class ContentIndexConfig(AppConfig):
    name = 'contentindex'
    verbose_name = 'Content Index'
