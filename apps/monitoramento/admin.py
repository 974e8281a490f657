# apps/monitoramento/admin.py

from django.contrib import admin

from .models import (
    ConfigResiduos, DadosOcupacao, EventoEnergia, LeituraAgua, LeituraGas,
    LeituraHidrometro, LeituraPiscina, Reservatorio,
)


class LeituraAdmin(admin.ModelAdmin):
    list_filter = ['condominio']
    readonly_fields = ['criado_em']
    date_hierarchy = 'criado_em'


@admin.register(LeituraPiscina)
class LeituraPiscinaAdmin(LeituraAdmin):
    list_display = ['condominio', 'ph', 'cloro', 'alcalinidade', 'temperatura', 'registrado_por', 'criado_em']


@admin.register(Reservatorio)
class ReservatorioAdmin(admin.ModelAdmin):
    list_display = ['nome', 'localizacao', 'capacidade_litros', 'condominio']
    list_filter = ['condominio']
    search_fields = ['nome', 'localizacao']


@admin.register(LeituraAgua)
class LeituraAguaAdmin(LeituraAdmin):
    list_display = ['condominio', 'reservatorio', 'nivel', 'qualidade', 'status_casan', 'criado_em']
    list_filter = ['condominio', 'qualidade', 'status_casan']


@admin.register(LeituraHidrometro)
class LeituraHidrometroAdmin(LeituraAdmin):
    list_display = ['condominio', 'valor', 'data_leitura', 'registrado_por']


@admin.register(LeituraGas)
class LeituraGasAdmin(LeituraAdmin):
    list_display = ['condominio', 'nivel', 'percentual_disponivel', 'criado_em']


@admin.register(EventoEnergia)
class EventoEnergiaAdmin(LeituraAdmin):
    list_display = ['condominio', 'status', 'descricao', 'criado_em', 'resolvido_em']
    list_filter = ['condominio', 'status']


@admin.register(DadosOcupacao)
class DadosOcupacaoAdmin(admin.ModelAdmin):
    list_display = [
        'condominio', 'total_unidades', 'unidades_ocupadas',
        'unidades_vagas', 'populacao_estimada', 'atualizado_em',
    ]
    readonly_fields = ['unidades_vagas', 'populacao_estimada', 'atualizado_em']


@admin.register(ConfigResiduos)
class ConfigResiduosAdmin(admin.ModelAdmin):
    list_display = ['condominio', 'horario_coleta', 'atualizado_por', 'atualizado_em']
    readonly_fields = ['atualizado_em']
