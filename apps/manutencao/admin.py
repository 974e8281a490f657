# apps/manutencao/admin.py

from django.contrib import admin
from django.utils.html import format_html

from .models import ChamadoManutencao, ConclusaoManutencao, Equipamento


@admin.register(Equipamento)
class EquipamentoAdmin(admin.ModelAdmin):
    list_display = ['nome', 'categoria', 'localizacao', 'status_badge', 'condominio']
    list_filter = ['categoria', 'status', 'condominio']
    search_fields = ['nome', 'localizacao', 'descricao']

    def status_badge(self, obj):
        cores = {
            'operacional': '#10B981',
            'atencao': '#F59E0B',
            'alerta': '#EF4444',
            'inativo': '#6B7280',
        }
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cores.get(obj.status, '#6B7280'), obj.get_status_display()
        )

    status_badge.short_description = 'Status'


class ConclusaoInline(admin.StackedInline):
    model = ConclusaoManutencao
    extra = 0
    fields = ['descricao', 'nome_executor', 'concluido_em']


@admin.register(ChamadoManutencao)
class ChamadoManutencaoAdmin(admin.ModelAdmin):
    list_display = ['titulo', 'equipamento', 'status', 'prioridade', 'solicitado_por', 'criado_em']
    list_filter = ['status', 'prioridade', 'condominio']
    search_fields = ['titulo', 'descricao', 'equipamento__nome']
    readonly_fields = ['criado_em', 'atualizado_em', 'concluido_em']
    inlines = [ConclusaoInline]
