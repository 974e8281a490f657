# apps/relatorios/views.py

import csv
import logging
from datetime import datetime
from io import BytesIO

import xlsxwriter
from django.http import HttpResponse
from django.utils import timezone
from django.utils.dateparse import parse_date
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from apps.core.permissions import (
    api_login_required, requer_condominio, requer_gestao, requer_modulo,
)
from apps.core.utils import resposta_ok
from apps.manutencao.models import Equipamento
from apps.monitoramento.models import LeituraAgua, LeituraGas, LeituraPiscina
from .utils import (
    CABECALHO_CHAMADOS, gerar_dados_dashboard, linhas_chamados, linhas_folha,
    nome_arquivo, resumo_manutencao, vendas_periodo,
)

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# Estilo padrão das tabelas dos PDFs
ESTILO_TABELA = TableStyle([
    ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
    ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
    ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('FONTSIZE', (0, 0), (-1, 0), 11),
    ('BOTTOMPADDING', (0, 0), (-1, 0), 10),
    ('BACKGROUND', (0, 1), (-1, -1), colors.beige),
    ('GRID', (0, 0), (-1, -1), 1, colors.black),
])


def _moeda(valor):
    texto = f"{valor:,.2f}"
    return 'R$ ' + texto.replace(',', 'X').replace('.', ',').replace('X', '.')


def _estilos():
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=20,
        spaceAfter=24,
        textColor=colors.darkblue
    )
    heading_style = ParagraphStyle(
        'CustomHeading',
        parent=styles['Heading2'],
        fontSize=14,
        spaceAfter=12,
        textColor=colors.darkblue
    )
    return styles, title_style, heading_style


def _cabecalho_pdf(story, titulo, condominio, styles, title_style):
    story.append(Paragraph(titulo, title_style))
    story.append(Paragraph(f"Condomínio: {condominio.nome}", styles['Normal']))
    story.append(Paragraph(f"Gerado em: {datetime.now().strftime('%d/%m/%Y %H:%M')}", styles['Normal']))
    story.append(Spacer(1, 20))


def _rodape_pdf(story, styles):
    story.append(Spacer(1, 30))
    story.append(Paragraph("Relatório gerado pelo Condo Gestão", styles['Normal']))


def _tabela(dados, estilo=ESTILO_TABELA):
    tabela = Table(dados, repeatRows=1)
    tabela.setStyle(estilo)
    return tabela


def _resposta_xlsx(output, filename):
    output.seek(0)
    response = HttpResponse(output.read(), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


# === DASHBOARD ===

@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
def dashboard_view(request):
    return resposta_ok(gerar_dados_dashboard(request.condominio))


# === MANUTENÇÃO ===

@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('manutencoes')
@requer_gestao
def relatorio_manutencao_pdf(request):
    """
    Relatório de manutenção em PDF: resumo, chamados por status,
    situação dos equipamentos e últimas leituras
    """
    condominio = request.condominio
    resumo = resumo_manutencao(condominio)

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo("manutencao", condominio, "pdf")}"'

    doc = SimpleDocTemplate(response, pagesize=A4)
    story = []
    styles, title_style, heading_style = _estilos()

    _cabecalho_pdf(story, "Relatório de Manutenção", condominio, styles, title_style)

    # Resumo
    story.append(Paragraph("Resumo", heading_style))
    story.append(_tabela([
        ['Indicador', 'Valor'],
        ['Total de chamados', str(resumo['total_chamados'])],
        ['Chamados em aberto', str(resumo['chamados_abertos'])],
        ['Equipamentos cadastrados', str(resumo['total_equipamentos'])],
        ['Equipamentos em atenção/alerta', str(resumo['equipamentos_em_alerta'])],
    ]))
    story.append(Spacer(1, 20))

    # Chamados por status
    story.append(Paragraph("Chamados por Status", heading_style))
    story.append(_tabela(
        [['Status', 'Quantidade']] +
        [[rotulo, str(total)] for rotulo, total in resumo['chamados_por_status'].items()]
    ))
    story.append(Spacer(1, 20))

    # Equipamentos
    story.append(Paragraph("Situação dos Equipamentos", heading_style))
    equipamentos = Equipamento.objects.filter(condominio=condominio).order_by('categoria', 'nome')
    if equipamentos:
        story.append(_tabela(
            [['Equipamento', 'Categoria', 'Local', 'Status']] +
            [
                [e.nome, e.get_categoria_display(), e.localizacao, e.get_status_display()]
                for e in equipamentos
            ]
        ))
    else:
        story.append(Paragraph("Nenhum equipamento cadastrado.", styles['Normal']))
    story.append(Spacer(1, 20))

    # Últimas leituras
    story.append(Paragraph("Últimas Leituras", heading_style))
    leituras = [['Leitura', 'Valor', 'Data']]
    piscina = LeituraPiscina.objects.filter(condominio=condominio).order_by('-criado_em').first()
    if piscina:
        leituras.append(['Piscina', f"pH {piscina.ph} / cloro {piscina.cloro} ppm",
                         timezone.localtime(piscina.criado_em).strftime('%d/%m/%Y')])
    agua = LeituraAgua.objects.filter(condominio=condominio).order_by('-criado_em').first()
    if agua:
        leituras.append(['Água', f"Nível {agua.nivel}% ({agua.get_qualidade_display()})",
                         timezone.localtime(agua.criado_em).strftime('%d/%m/%Y')])
    gas = LeituraGas.objects.filter(condominio=condominio).order_by('-criado_em').first()
    if gas:
        leituras.append(['Gás', f"{gas.percentual_disponivel}% disponível",
                         timezone.localtime(gas.criado_em).strftime('%d/%m/%Y')])

    if len(leituras) > 1:
        story.append(_tabela(leituras))
    else:
        story.append(Paragraph("Nenhuma leitura registrada.", styles['Normal']))

    _rodape_pdf(story, styles)
    doc.build(story)

    logger.info(f"📄 Relatório de manutenção gerado para {condominio.nome} por {request.user.email}")
    return response


@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('manutencoes')
@requer_gestao
def exportar_manutencao_csv(request):
    condominio = request.condominio

    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo("chamados", condominio, "csv")}"'
    response.write('\ufeff')  # BOM para UTF-8

    writer = csv.writer(response)
    writer.writerow(CABECALHO_CHAMADOS)
    for linha in linhas_chamados(condominio):
        writer.writerow(linha)

    return response


@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('manutencoes')
@requer_gestao
def exportar_manutencao_excel(request):
    """
    Chamados em XLSX, com uma aba de resumo
    """
    condominio = request.condominio
    resumo = resumo_manutencao(condominio)

    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True})

    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#366092',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})

    # Aba 1: Resumo
    resumo_sheet = workbook.add_worksheet('Resumo')
    resumo_sheet.write('A1', 'RELATÓRIO DE MANUTENÇÃO', header_format)
    resumo_sheet.write('A3', 'Condomínio:', header_format)
    resumo_sheet.write('B3', condominio.nome, cell_format)
    resumo_sheet.write('A4', 'Total de chamados:', header_format)
    resumo_sheet.write('B4', resumo['total_chamados'], cell_format)
    resumo_sheet.write('A5', 'Em aberto:', header_format)
    resumo_sheet.write('B5', resumo['chamados_abertos'], cell_format)
    resumo_sheet.set_column('A:A', 22)
    resumo_sheet.set_column('B:B', 30)

    # Aba 2: Chamados
    chamados_sheet = workbook.add_worksheet('Chamados')
    for col, titulo in enumerate(CABECALHO_CHAMADOS):
        chamados_sheet.write(0, col, titulo, header_format)
    for row, linha in enumerate(linhas_chamados(condominio), start=1):
        for col, valor in enumerate(linha):
            chamados_sheet.write(row, col, valor, cell_format)
    chamados_sheet.set_column('B:C', 30)
    chamados_sheet.set_column('D:H', 16)

    workbook.close()
    return _resposta_xlsx(output, nome_arquivo('chamados', condominio, 'xlsx'))


# === FOLHA DE PAGAMENTO ===

CABECALHO_FOLHA = [
    'Matrícula', 'Nome', 'Função', 'Salário', 'INSS', 'IRRF',
    'FGTS', 'Líquido', 'Custo mensal', 'Passivo',
]
CAMPOS_VALOR_FOLHA = ['salario', 'inss', 'irrf', 'fgts', 'liquido', 'custo_mensal', 'passivo']


@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('rh')
@requer_gestao
def exportar_folha_excel(request):
    condominio = request.condominio
    linhas = linhas_folha(condominio)

    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True})

    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#366092',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})
    money_format = workbook.add_format({'num_format': 'R$ #,##0.00', 'border': 1})
    total_format = workbook.add_format({'num_format': 'R$ #,##0.00', 'border': 1, 'bold': True})

    sheet = workbook.add_worksheet('Folha')
    for col, titulo in enumerate(CABECALHO_FOLHA):
        sheet.write(0, col, titulo, header_format)

    for row, linha in enumerate(linhas, start=1):
        sheet.write(row, 0, linha['matricula'], cell_format)
        sheet.write(row, 1, linha['nome'], cell_format)
        sheet.write(row, 2, linha['funcao'], cell_format)
        for offset, campo in enumerate(CAMPOS_VALOR_FOLHA, start=3):
            sheet.write_number(row, offset, float(linha[campo]), money_format)

    # Totais
    total_row = len(linhas) + 1
    sheet.write(total_row, 0, 'TOTAL', header_format)
    for offset, campo in enumerate(CAMPOS_VALOR_FOLHA, start=3):
        sheet.write_number(total_row, offset, float(sum(item[campo] for item in linhas)), total_format)

    sheet.set_column('A:A', 12)
    sheet.set_column('B:C', 28)
    sheet.set_column('D:J', 14)

    workbook.close()
    return _resposta_xlsx(output, nome_arquivo('folha', condominio, 'xlsx'))


@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('rh')
@requer_gestao
def relatorio_folha_pdf(request):
    condominio = request.condominio
    linhas = linhas_folha(condominio)

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo("folha", condominio, "pdf")}"'

    doc = SimpleDocTemplate(response, pagesize=landscape(A4))
    story = []
    styles, title_style, heading_style = _estilos()

    _cabecalho_pdf(story, "Folha de Pagamento", condominio, styles, title_style)

    if linhas:
        dados = [CABECALHO_FOLHA]
        for linha in linhas:
            dados.append(
                [linha['matricula'], linha['nome'], linha['funcao']] +
                [_moeda(linha[campo]) for campo in CAMPOS_VALOR_FOLHA]
            )
        dados.append(
            ['TOTAL', '', ''] +
            [_moeda(sum(item[campo] for item in linhas)) for campo in CAMPOS_VALOR_FOLHA]
        )

        estilo = TableStyle(ESTILO_TABELA.getCommands() + [
            ('FONTSIZE', (0, 1), (-1, -1), 8),
            ('ALIGN', (3, 1), (-1, -1), 'RIGHT'),
            ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
        ])
        story.append(_tabela(dados, estilo))
    else:
        story.append(Paragraph("Nenhum funcionário ativo.", styles['Normal']))

    _rodape_pdf(story, styles)
    doc.build(story)

    logger.info(f"📄 Folha de pagamento gerada para {condominio.nome} por {request.user.email}")
    return response


# === MINI MERCADO ===

@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('mercado')
@requer_gestao
def exportar_vendas_csv(request):
    """
    Vendas do período (?inicio=AAAA-MM-DD&fim=AAAA-MM-DD)
    """
    condominio = request.condominio
    inicio = parse_date(request.GET.get('inicio', '') or '')
    fim = parse_date(request.GET.get('fim', '') or '')

    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{nome_arquivo("vendas", condominio, "csv")}"'
    response.write('\ufeff')  # BOM para UTF-8

    writer = csv.writer(response)
    writer.writerow([
        'Venda', 'Data', 'Unidade', 'Morador', 'Itens',
        'Subtotal', 'Desconto', 'Total', 'Pagamento', 'Status',
    ])

    for venda in vendas_periodo(condominio, inicio, fim):
        itens = '; '.join(f"{item.quantidade}x {item.produto.nome}" for item in venda.itens.all())
        writer.writerow([
            venda.pk,
            timezone.localtime(venda.data_venda).strftime('%d/%m/%Y %H:%M'),
            venda.unidade,
            venda.morador_nome,
            itens,
            f"{venda.subtotal:.2f}",
            f"{venda.desconto:.2f}",
            f"{venda.total:.2f}",
            venda.get_forma_pagamento_display(),
            venda.get_status_display(),
        ])

    return response
