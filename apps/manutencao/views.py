# apps/manutencao/views.py

import logging

from django.db import transaction
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.api import RecursoCondominioView
from apps.core.permissions import api_login_required, requer_condominio, requer_modulo
from apps.core.utils import (
    CorpoInvalido, dados_para_formulario, ler_json, resposta_erro,
    resposta_formulario_invalido, resposta_ok, serializar,
)
from .forms import ChamadoForm, ConclusaoForm, EquipamentoForm, StatusChamadoForm
from .models import ChamadoManutencao, ConclusaoManutencao, Equipamento
from .services import atualizar_status_chamado

logger = logging.getLogger(__name__)


class EquipamentoView(RecursoCondominioView):
    model = Equipamento
    form_class = EquipamentoForm
    modulo = 'manutencoes'
    ordering = ('nome',)
    filtros = {'categoria': 'categoria', 'status': 'status'}
    nao_encontrado = 'Equipamento não encontrado'


class ChamadoView(RecursoCondominioView):
    """
    Chamados de manutenção

    Depois de aberto, um chamado só tem o status alterado (PATCH);
    cada mudança gera notificação para quem abriu.
    """

    model = ChamadoManutencao
    form_class = ChamadoForm
    modulo = 'manutencoes'
    campo_autor = 'solicitado_por'
    filtros = {'status': 'status', 'equipamento': 'equipamento_id', 'prioridade': 'prioridade'}
    nao_encontrado = 'Chamado não encontrado'

    def serializar(self, obj):
        dados = serializar(obj)
        dados['equipamento_nome'] = obj.equipamento.nome
        return dados

    def get_base_queryset(self):
        return super().get_base_queryset().select_related('equipamento')

    def patch(self, request, pk=None):
        if pk is None:
            return super().patch(request, pk)

        chamado = self.get_object(pk)
        if chamado is None:
            return resposta_erro(self.nao_encontrado, 404)

        try:
            corpo = ler_json(request)
        except CorpoInvalido as e:
            return resposta_erro(str(e), 400)

        form = StatusChamadoForm({'status': corpo.get('status')})
        if not form.is_valid():
            return resposta_formulario_invalido(form)

        atualizar_status_chamado(chamado, form.cleaned_data['status'])
        return resposta_ok(self.serializar(chamado))

    put = patch


@csrf_exempt
@require_http_methods(['POST'])
@api_login_required
@requer_condominio
@requer_modulo('manutencoes')
def concluir_chamado_view(request, chamado_id):
    """
    Registra a conclusão de um chamado e o marca como concluído
    """
    chamado = ChamadoManutencao.objects.filter(
        pk=chamado_id, condominio=request.condominio
    ).select_related('equipamento').first()
    if chamado is None:
        return resposta_erro('Chamado não encontrado', 404)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    instancia = ConclusaoManutencao(
        condominio=request.condominio,
        chamado=chamado,
        equipamento=chamado.equipamento,
        executado_por=request.user,
    )
    form = ConclusaoForm(
        dados_para_formulario(instancia, corpo, ConclusaoForm._meta.fields),
        instance=instancia,
        condominio=request.condominio,
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    with transaction.atomic():
        conclusao = form.save(commit=False)
        if not conclusao.nome_executor:
            conclusao.nome_executor = request.user.get_nome_exibicao()
        if not conclusao.localizacao:
            conclusao.localizacao = chamado.equipamento.localizacao
        conclusao.save()

        atualizar_status_chamado(chamado, 'concluido')

    return resposta_ok(serializar(conclusao), status=201)


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('manutencoes')
def conclusao_chamado_view(request, chamado_id):
    conclusao = ConclusaoManutencao.objects.filter(
        chamado_id=chamado_id, condominio=request.condominio
    ).first()
    if conclusao is None:
        return resposta_erro('Conclusão não encontrada', 404)
    return resposta_ok(serializar(conclusao))
