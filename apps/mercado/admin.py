# apps/mercado/admin.py

from django.contrib import admin

from .models import Cashback, Categoria, ItemVenda, Produto, Promocao, Venda


@admin.register(Categoria)
class CategoriaAdmin(admin.ModelAdmin):
    list_display = ['nome', 'ordem', 'ativo', 'condominio']
    list_filter = ['ativo', 'condominio']
    search_fields = ['nome']


@admin.register(Produto)
class ProdutoAdmin(admin.ModelAdmin):
    list_display = ['nome', 'categoria', 'preco_venda', 'estoque_atual', 'estoque_minimo', 'ativo', 'condominio']
    list_filter = ['ativo', 'destaque', 'categoria', 'condominio']
    search_fields = ['nome', 'codigo_barras']
    list_editable = ['estoque_atual']


@admin.register(Promocao)
class PromocaoAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'produto', 'desconto_percentual', 'preco_promocional', 'data_inicio', 'data_fim', 'ativo']
    list_filter = ['ativo', 'condominio']
    search_fields = ['titulo', 'produto__nome']


class ItemVendaInline(admin.TabularInline):
    model = ItemVenda
    extra = 0
    readonly_fields = ['produto', 'quantidade', 'preco_unitario', 'total']


@admin.register(Venda)
class VendaAdmin(admin.ModelAdmin):
    list_display = ['id', 'unidade', 'morador_nome', 'total', 'forma_pagamento', 'status', 'data_venda']
    list_filter = ['forma_pagamento', 'status', 'condominio']
    search_fields = ['unidade', 'morador_nome']
    date_hierarchy = 'data_venda'
    inlines = [ItemVendaInline]


@admin.register(Cashback)
class CashbackAdmin(admin.ModelAdmin):
    list_display = ['unidade', 'tipo', 'valor', 'data_expiracao', 'venda', 'condominio']
    list_filter = ['tipo', 'condominio']
    search_fields = ['unidade', 'morador_nome']
