# apps/documentos/apps.py

from django.apps import AppConfig


class DocumentosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.documentos'
    verbose_name = 'Documentos e Fornecedores'
