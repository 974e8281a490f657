# apps/comunicacao/admin.py

from django.contrib import admin

from .models import Comunicado, Notificacao


@admin.register(Comunicado)
class ComunicadoAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'condominio', 'prioridade', 'criado_por', 'criado_em', 'expira_em']
    list_filter = ['prioridade', 'condominio']
    search_fields = ['titulo', 'conteudo']
    readonly_fields = ['criado_em']


@admin.register(Notificacao)
class NotificacaoAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'usuario', 'tipo', 'lida', 'criado_em']
    list_filter = ['tipo', 'lida']
    search_fields = ['titulo', 'mensagem', 'usuario__email']
    readonly_fields = ['criado_em']
