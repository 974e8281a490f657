# apps/comunicacao/views.py

import logging

from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.api import RecursoCondominioView
from apps.core.permissions import api_login_required
from apps.core.utils import resposta_erro, resposta_ok, serializar
from .forms import ComunicadoForm
from .models import Comunicado, Notificacao
from .services import notificar_usuarios

logger = logging.getLogger(__name__)

LIMITE_NOTIFICACOES = 50


class ComunicadoView(RecursoCondominioView):
    """
    CRUD de comunicados

    Criar ou editar um comunicado notifica os usuários ativos do
    condomínio. Na criação o autor fica de fora.
    """

    model = Comunicado
    form_class = ComunicadoForm
    modulo = 'comunicados'
    escrita_requer = 'sindico'
    campo_autor = 'criado_por'
    filtros = {'prioridade': 'prioridade'}
    nao_encontrado = 'Comunicado não encontrado'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.request.GET.get('limite', '').isdigit():
            queryset = queryset[:int(self.request.GET['limite'])]
        return queryset

    def depois_de_salvar(self, obj, criando):
        # Na criação o autor não é avisado; na edição todos são
        if criando:
            tipo, titulo, excluir = 'announcement_new', 'Novo Comunicado', obj.criado_por
        else:
            tipo, titulo, excluir = 'announcement_updated', 'Comunicado Atualizado', None

        notificar_usuarios(
            obj.condominio.usuarios_ativos(),
            tipo=tipo,
            titulo=titulo,
            mensagem=obj.titulo,
            condominio=obj.condominio,
            relacionado_id=obj.pk,
            excluir=excluir,
        )


# === NOTIFICAÇÕES DO USUÁRIO ===

@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
def notificacoes_view(request):
    notificacoes = request.user.notificacoes.all()[:LIMITE_NOTIFICACOES]
    dados = [serializar(n) for n in notificacoes]
    return resposta_ok(dados, count=len(dados))


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
def notificacoes_nao_lidas_view(request):
    return resposta_ok({'count': request.user.notificacoes.filter(lida=False).count()})


@csrf_exempt
@require_http_methods(['PATCH'])
@api_login_required
def marcar_lida_view(request, notificacao_id):
    notificacao = Notificacao.objects.filter(pk=notificacao_id, usuario=request.user).first()
    if notificacao is None:
        return resposta_erro('Notificação não encontrada', 404)

    notificacao.lida = True
    notificacao.save(update_fields=['lida'])
    return resposta_ok(serializar(notificacao))


@csrf_exempt
@require_http_methods(['PATCH'])
@api_login_required
def marcar_todas_lidas_view(request):
    atualizadas = request.user.notificacoes.filter(lida=False).update(lida=True)
    return resposta_ok({'atualizadas': atualizadas})
