# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import Condominio, PermissaoModulo, Usuario, VinculoCondominio


class VinculoInline(admin.TabularInline):
    model = VinculoCondominio
    extra = 0
    fields = ['usuario', 'papel', 'unidade', 'ativo']
    autocomplete_fields = ['usuario']


class PermissaoModuloInline(admin.TabularInline):
    model = PermissaoModulo
    extra = 0
    fields = ['chave', 'rotulo', 'habilitado', 'atualizado_por']
    readonly_fields = ['atualizado_por']


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    list_display = [
        'username', 'email', 'nome', 'papel_badge',
        'is_active', 'date_joined'
    ]
    list_filter = ['papel', 'is_staff', 'is_active', 'date_joined']
    search_fields = ['username', 'nome', 'first_name', 'last_name', 'email']
    ordering = ['-date_joined']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Condomínio', {
            'fields': ('nome', 'papel', 'unidade', 'telefone')
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Condomínio', {
            'fields': ('email', 'nome', 'papel', 'unidade')
        }),
    )

    def papel_badge(self, obj):
        """Exibe o papel do usuário com badge colorido"""
        cores = {
            'admin': '#EF4444',
            'sindico': '#F59E0B',
            'condomino': '#3B82F6',
        }
        cor = cores.get(obj.papel, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_papel_display()
        )

    papel_badge.short_description = 'Papel'


@admin.register(Condominio)
class CondominioAdmin(admin.ModelAdmin):
    """Admin dos condomínios (tenants)"""

    list_display = ['nome', 'cidade', 'estado', 'total_unidades', 'usuarios_count', 'ativo', 'criado_em']
    list_filter = ['ativo', 'estado']
    search_fields = ['nome', 'cidade', 'email']
    readonly_fields = ['criado_em', 'atualizado_em']
    inlines = [VinculoInline, PermissaoModuloInline]

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('nome', 'total_unidades', 'logo', 'ativo')
        }),
        ('Endereço e Contato', {
            'fields': ('endereco', 'cidade', 'estado', 'cep', 'telefone', 'email')
        }),
        ('Datas', {
            'fields': ('criado_em', 'atualizado_em'),
            'classes': ('collapse',)
        })
    )

    def usuarios_count(self, obj):
        return obj.vinculos.filter(ativo=True).count()

    usuarios_count.short_description = 'Usuários'


@admin.register(VinculoCondominio)
class VinculoCondominioAdmin(admin.ModelAdmin):
    list_display = ['usuario', 'condominio', 'papel', 'unidade', 'ativo']
    list_filter = ['papel', 'ativo', 'condominio']
    search_fields = ['usuario__email', 'usuario__nome', 'condominio__nome', 'unidade']


@admin.register(PermissaoModulo)
class PermissaoModuloAdmin(admin.ModelAdmin):
    list_display = ['condominio', 'chave', 'habilitado', 'atualizado_por', 'atualizado_em']
    list_filter = ['chave', 'habilitado']
    list_editable = ['habilitado']
    search_fields = ['condominio__nome']
