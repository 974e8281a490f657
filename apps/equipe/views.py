# apps/equipe/views.py

import logging

from django.utils import timezone
from django.utils.dateparse import parse_date
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.api import RecursoCondominioView
from apps.core.permissions import (
    CondoPermissions, MSG_REQUER_GESTAO, api_login_required, requer_condominio,
    requer_gestao, requer_modulo,
)
from apps.core.utils import (
    CorpoInvalido, dados_para_formulario, ler_json, resposta_erro,
    resposta_formulario_invalido, resposta_ok, serializar,
)
from . import services
from .forms import (
    ExecucaoProcessoForm, ListaAtividadesForm, MembroEquipeForm,
    ModeloAtividadeForm, ProcessoForm,
)
from .models import (
    ExecucaoProcesso, ItemListaAtividade, ListaAtividades, MembroEquipe,
    ModeloAtividade, Processo,
)

logger = logging.getLogger(__name__)


def serializar_lista(lista, com_itens=False):
    dados = serializar(lista)
    dados['membro_nome'] = lista.membro.nome
    dados['membro_whatsapp'] = lista.membro.whatsapp
    if com_itens:
        dados['itens'] = [serializar(item) for item in lista.itens.all()]
    return dados


# === CADASTROS ===

class MembroEquipeView(RecursoCondominioView):
    model = MembroEquipe
    form_class = MembroEquipeForm
    modulo = 'equipe'
    escrita_requer = 'gestao'
    ordering = ('nome',)
    filtros = {'status': 'status', 'funcao': 'funcao'}
    nao_encontrado = 'Membro não encontrado'


class ProcessoView(RecursoCondominioView):
    model = Processo
    form_class = ProcessoForm
    modulo = 'equipe'
    escrita_requer = 'gestao'
    ordering = ('nome',)
    filtros = {'categoria': 'categoria', 'frequencia': 'frequencia', 'responsavel': 'responsavel_id'}
    nao_encontrado = 'Processo não encontrado'


class ModeloAtividadeView(RecursoCondominioView):
    model = ModeloAtividade
    form_class = ModeloAtividadeForm
    modulo = 'equipe'
    escrita_requer = 'gestao'
    ordering = ('ordem', 'titulo')
    filtros = {'funcao': 'funcao', 'categoria': 'categoria'}
    nao_encontrado = 'Modelo de atividade não encontrado'


# === EXECUÇÕES DE PROCESSOS ===

@csrf_exempt
@require_http_methods(['GET', 'POST'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
def execucoes_view(request, processo_id):
    processo = Processo.objects.filter(pk=processo_id, condominio=request.condominio).first()
    if processo is None:
        return resposta_erro('Processo não encontrado', 404)

    if request.method == 'GET':
        dados = [serializar(e) for e in processo.execucoes.all()]
        return resposta_ok(dados, count=len(dados))

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    instancia = ExecucaoProcesso(condominio=request.condominio, processo=processo)
    form = ExecucaoProcessoForm(
        dados_para_formulario(instancia, corpo, ExecucaoProcessoForm._meta.fields),
        instance=instancia,
        condominio=request.condominio,
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    execucao = _aplicar_status(form.save(commit=False))
    execucao.save()
    return resposta_ok(serializar(execucao), status=201)


@csrf_exempt
@require_http_methods(['PATCH'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
def execucao_atualizar_view(request, execucao_id):
    execucao = ExecucaoProcesso.objects.filter(pk=execucao_id, condominio=request.condominio).first()
    if execucao is None:
        return resposta_erro('Execução não encontrada', 404)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    form = ExecucaoProcessoForm(
        dados_para_formulario(execucao, corpo, ExecucaoProcessoForm._meta.fields),
        instance=execucao,
        condominio=request.condominio,
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    execucao = _aplicar_status(form.save(commit=False))
    execucao.save()
    return resposta_ok(serializar(execucao))


def _aplicar_status(execucao):
    """Carimba início e conclusão conforme o status"""
    agora = timezone.now()
    if execucao.status in ('em_andamento', 'concluido') and execucao.iniciado_em is None:
        execucao.iniciado_em = agora
    if execucao.status == 'concluido':
        execucao.concluido_em = execucao.concluido_em or agora
    else:
        execucao.concluido_em = None
    return execucao


# === LISTAS DE ATIVIDADES ===

@csrf_exempt
@require_http_methods(['GET', 'POST'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
def listas_view(request):
    """
    GET: listas do condomínio (?membro=, ?status=, ?data=)
    POST: cria lista a partir de modelos de atividade
    """
    if request.method == 'GET':
        listas = ListaAtividades.objects.filter(condominio=request.condominio).select_related('membro')
        if request.GET.get('membro', '').isdigit():
            listas = listas.filter(membro_id=request.GET['membro'])
        if request.GET.get('status'):
            listas = listas.filter(status=request.GET['status'])
        data = parse_date(request.GET.get('data', '') or '')
        if data:
            listas = listas.filter(data_execucao=data)

        dados = [serializar_lista(lista) for lista in listas]
        return resposta_ok(dados, count=len(dados))

    if not CondoPermissions.is_gestao(request):
        return resposta_erro(MSG_REQUER_GESTAO, 403)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    modelos = corpo.get('modelos') or []
    if not isinstance(modelos, list) or not all(str(m).isdigit() for m in modelos):
        return resposta_erro('modelos deve ser uma lista de ids', 400)

    instancia = ListaAtividades(condominio=request.condominio, criado_por=request.user)
    form = ListaAtividadesForm(
        dados_para_formulario(instancia, corpo, ListaAtividadesForm._meta.fields),
        instance=instancia,
        condominio=request.condominio,
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    lista = services.criar_lista(form.save(commit=False), modelos)
    return resposta_ok(serializar_lista(lista, com_itens=True), status=201)


def _obter_lista(request, lista_id):
    return ListaAtividades.objects.filter(
        pk=lista_id, condominio=request.condominio
    ).select_related('membro').first()


@csrf_exempt
@require_http_methods(['GET', 'DELETE'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
def lista_detalhe_view(request, lista_id):
    lista = _obter_lista(request, lista_id)
    if lista is None:
        return resposta_erro('Lista não encontrada', 404)

    if request.method == 'GET':
        return resposta_ok(serializar_lista(lista, com_itens=True))

    if not CondoPermissions.is_gestao(request):
        return resposta_erro(MSG_REQUER_GESTAO, 403)

    lista.delete()
    logger.info(f"🗑️ Lista de atividades {lista_id} excluída por {request.user.email}")
    return resposta_ok()


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
def lista_itens_view(request, lista_id):
    lista = _obter_lista(request, lista_id)
    if lista is None:
        return resposta_erro('Lista não encontrada', 404)

    dados = [serializar(item) for item in lista.itens.all()]
    return resposta_ok(dados, count=len(dados))


@csrf_exempt
@require_http_methods(['PATCH'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
def item_concluir_view(request, item_id):
    item = ItemListaAtividade.objects.select_related('lista').filter(
        pk=item_id, lista__condominio=request.condominio
    ).first()
    if item is None:
        return resposta_erro('Atividade não encontrada', 404)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    concluido = corpo.get('concluido', True)
    if not isinstance(concluido, bool):
        return resposta_erro('concluido deve ser booleano', 400)

    services.marcar_item(item, concluido)
    return resposta_ok({**serializar(item), 'status_lista': item.lista.status})


@csrf_exempt
@require_http_methods(['POST'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
@requer_gestao
def enviar_whatsapp_view(request, lista_id):
    lista = _obter_lista(request, lista_id)
    if lista is None:
        return resposta_erro('Lista não encontrada', 404)

    try:
        resultado = services.enviar_whatsapp(lista)
    except ValueError as e:
        return resposta_erro(str(e), 400)

    logger.info(f"📲 Lista {lista.pk} enviada por WhatsApp para {lista.membro.nome}")
    return resposta_ok(resultado, **resultado)


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('equipe')
def estatisticas_view(request):
    return resposta_ok(services.estatisticas(request.condominio))
