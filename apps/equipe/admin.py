# apps/equipe/admin.py

from django.contrib import admin

from .models import (
    ExecucaoProcesso, ItemListaAtividade, ListaAtividades, MembroEquipe,
    ModeloAtividade, Processo,
)


@admin.register(MembroEquipe)
class MembroEquipeAdmin(admin.ModelAdmin):
    list_display = ['nome', 'funcao', 'telefone', 'whatsapp', 'status', 'condominio']
    list_filter = ['funcao', 'status', 'condominio']
    search_fields = ['nome', 'cpf', 'email']


@admin.register(Processo)
class ProcessoAdmin(admin.ModelAdmin):
    list_display = ['nome', 'categoria', 'frequencia', 'responsavel', 'ativo', 'condominio']
    list_filter = ['categoria', 'frequencia', 'ativo', 'condominio']
    search_fields = ['nome', 'descricao']


@admin.register(ExecucaoProcesso)
class ExecucaoProcessoAdmin(admin.ModelAdmin):
    list_display = ['processo', 'executado_por', 'status', 'iniciado_em', 'concluido_em']
    list_filter = ['status', 'condominio']


@admin.register(ModeloAtividade)
class ModeloAtividadeAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'funcao', 'categoria', 'area', 'tempo_estimado', 'ordem', 'ativo']
    list_filter = ['funcao', 'ativo', 'condominio']
    search_fields = ['titulo', 'descricao']


class ItemListaInline(admin.TabularInline):
    model = ItemListaAtividade
    extra = 0
    fields = ['ordem', 'titulo', 'area', 'tempo_estimado', 'concluido', 'data_conclusao']


@admin.register(ListaAtividades)
class ListaAtividadesAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'membro', 'data_execucao', 'turno', 'status', 'enviado_whatsapp']
    list_filter = ['status', 'turno', 'prioridade', 'enviado_whatsapp', 'condominio']
    search_fields = ['titulo', 'membro__nome']
    date_hierarchy = 'data_execucao'
    inlines = [ItemListaInline]
