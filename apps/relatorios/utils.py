# apps/relatorios/utils.py

from datetime import datetime, timedelta
from typing import Dict, List

from django.conf import settings
from django.db.models import Count
from django.utils import timezone
from django.utils.text import slugify

from apps.comunicacao.models import Comunicado
from apps.core.utils import serializar
from apps.documentos.models import Documento
from apps.manutencao.models import ChamadoManutencao, Equipamento
from apps.mercado.models import Venda
from apps.monitoramento.models import (
    DadosOcupacao, EventoEnergia, LeituraAgua, LeituraGas, LeituraPiscina,
)
from apps.rh.calculos import calcular_folha
from apps.rh.models import Funcionario


def _ultima(modelo, condominio):
    leitura = modelo.objects.filter(condominio=condominio).order_by('-criado_em', '-id').first()
    return serializar(leitura) if leitura else None


def gerar_dados_dashboard(condominio) -> Dict:
    """
    Visão consolidada do condomínio para a tela inicial
    """
    hoje = timezone.localdate()
    limite_documentos = hoje + timedelta(days=settings.CONDO_DOCUMENTOS_ALERTA_DIAS)

    ultimo_evento = EventoEnergia.objects.filter(condominio=condominio).order_by('-criado_em', '-id').first()
    ocupacao = DadosOcupacao.objects.filter(condominio=condominio).first()
    comunicados = Comunicado.objects.filter(condominio=condominio).order_by('-criado_em', '-id')[:5]

    return {
        'openRequests': ChamadoManutencao.objects.filter(
            condominio=condominio
        ).exclude(status='concluido').count(),
        'totalEquipment': Equipamento.objects.filter(condominio=condominio).count(),
        'latestPoolReading': _ultima(LeituraPiscina, condominio),
        'latestWaterReading': _ultima(LeituraAgua, condominio),
        'latestGasReading': _ultima(LeituraGas, condominio),
        'currentEnergyStatus': ultimo_evento.status if ultimo_evento else 'ok',
        'occupancy': serializar(ocupacao) if ocupacao else None,
        'expiringDocuments': Documento.objects.filter(
            condominio=condominio, data_validade__lte=limite_documentos
        ).count(),
        'recentAnnouncements': [serializar(c) for c in comunicados],
    }


def resumo_manutencao(condominio) -> Dict:
    """Contagens usadas no cabeçalho do relatório de manutenção"""
    chamados = ChamadoManutencao.objects.filter(condominio=condominio)
    equipamentos = Equipamento.objects.filter(condominio=condominio)

    por_status = {
        rotulo: 0 for _, rotulo in ChamadoManutencao.STATUS_CHOICES
    }
    rotulos = dict(ChamadoManutencao.STATUS_CHOICES)
    for linha in chamados.values('status').annotate(total=Count('id')):
        por_status[rotulos.get(linha['status'], linha['status'])] = linha['total']

    return {
        'total_chamados': chamados.count(),
        'chamados_abertos': chamados.exclude(status='concluido').count(),
        'total_equipamentos': equipamentos.count(),
        'equipamentos_em_alerta': equipamentos.filter(status__in=['atencao', 'alerta']).count(),
        'chamados_por_status': por_status,
    }


def linhas_chamados(condominio) -> List[List]:
    """Chamados para exportação (mais recentes primeiro)"""
    chamados = ChamadoManutencao.objects.filter(
        condominio=condominio
    ).select_related('equipamento', 'solicitado_por').order_by('-criado_em', '-id')

    linhas = []
    for chamado in chamados[:settings.CONDO_REPORTS_MAX_ITEMS]:
        linhas.append([
            chamado.pk,
            chamado.titulo,
            chamado.equipamento.nome,
            chamado.get_status_display(),
            chamado.get_prioridade_display(),
            chamado.solicitado_por.get_nome_exibicao() if chamado.solicitado_por else '',
            timezone.localtime(chamado.criado_em).strftime('%d/%m/%Y %H:%M'),
            timezone.localtime(chamado.concluido_em).strftime('%d/%m/%Y %H:%M') if chamado.concluido_em else '',
        ])
    return linhas


CABECALHO_CHAMADOS = [
    'ID', 'Título', 'Equipamento', 'Status', 'Prioridade',
    'Solicitado por', 'Aberto em', 'Concluído em',
]


def linhas_folha(condominio) -> List[Dict]:
    """Folha de pagamento dos funcionários ativos"""
    linhas = []
    for funcionario in Funcionario.objects.filter(condominio=condominio, status='ativo').order_by('nome'):
        folha = calcular_folha(funcionario)
        linhas.append({
            'matricula': funcionario.matricula,
            'nome': funcionario.nome,
            'funcao': funcionario.funcao,
            'salario': folha['salario_base'],
            'inss': folha['inss']['valor'],
            'irrf': folha['irrf']['valor'],
            'fgts': folha['fgts']['valor'],
            'liquido': folha['salario_liquido'],
            'custo_mensal': folha['custo_mensal'],
            'passivo': folha['passivo']['total'],
        })
    return linhas


def vendas_periodo(condominio, inicio=None, fim=None):
    vendas = Venda.objects.filter(condominio=condominio).prefetch_related('itens__produto')
    if inicio:
        vendas = vendas.filter(data_venda__date__gte=inicio)
    if fim:
        vendas = vendas.filter(data_venda__date__lte=fim)
    return vendas.order_by('data_venda', 'id')[:settings.CONDO_REPORTS_MAX_ITEMS]


def nome_arquivo(prefixo: str, condominio, extensao: str) -> str:
    nome = slugify(condominio.nome).replace('-', '_')
    return f"{prefixo}_{nome}_{datetime.now():%Y%m%d}.{extensao}"
