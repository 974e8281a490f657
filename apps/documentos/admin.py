# apps/documentos/admin.py

from django.contrib import admin

from .models import Documento, Fornecedor


@admin.register(Documento)
class DocumentoAdmin(admin.ModelAdmin):
    list_display = ['nome', 'tipo', 'data_validade', 'vencido', 'condominio']
    list_filter = ['tipo', 'condominio']
    search_fields = ['nome', 'observacoes']

    @admin.display(boolean=True, description='Vencido')
    def vencido(self, obj):
        return obj.vencido


@admin.register(Fornecedor)
class FornecedorAdmin(admin.ModelAdmin):
    list_display = ['nome', 'categoria', 'telefone', 'whatsapp', 'condominio']
    list_filter = ['categoria', 'condominio']
    search_fields = ['nome', 'categoria', 'email']
