# apps/monitoramento/views.py

import logging

from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.api import RecursoCondominioView
from apps.core.permissions import (
    CondoPermissions, MSG_REQUER_GESTAO, MSG_REQUER_SINDICO, api_login_required,
    requer_condominio, requer_modulo,
)
from apps.core.utils import (
    CorpoInvalido, dados_para_formulario, erros_formulario, ler_json,
    resposta_erro, resposta_formulario_invalido, resposta_ok, serializar,
)
from .forms import (
    ConfigResiduosForm, DadosOcupacaoForm, EventoEnergiaForm, LeituraAguaForm,
    LeituraGasForm, LeituraHidrometroForm, LeituraPiscinaForm, ReservatorioForm,
)
from .models import (
    ConfigResiduos, DadosOcupacao, EventoEnergia, LeituraAgua, LeituraGas,
    LeituraHidrometro, LeituraPiscina, Reservatorio,
)

logger = logging.getLogger(__name__)


class LeituraView(RecursoCondominioView):
    """Base das leituras: registradas pelo usuário, mais recentes primeiro"""

    campo_autor = 'registrado_por'
    nao_encontrado = 'Leitura não encontrada'


# === PISCINA ===

class LeituraPiscinaView(LeituraView):
    model = LeituraPiscina
    form_class = LeituraPiscinaForm
    modulo = 'piscina'


# === ÁGUA ===

class ReservatorioView(RecursoCondominioView):
    model = Reservatorio
    form_class = ReservatorioForm
    modulo = 'agua'
    escrita_requer = 'gestao'
    ordering = ('nome',)
    nao_encontrado = 'Reservatório não encontrado'


class LeituraAguaView(LeituraView):
    model = LeituraAgua
    form_class = LeituraAguaForm
    modulo = 'agua'
    filtros = {'reservatorio': 'reservatorio_id'}

    def get_base_queryset(self):
        return super().get_base_queryset().select_related('reservatorio')

    def serializar(self, obj):
        dados = serializar(obj)
        dados['reservatorio_nome'] = obj.reservatorio.nome if obj.reservatorio else None
        return dados


class LeituraHidrometroView(LeituraView):
    model = LeituraHidrometro
    form_class = LeituraHidrometroForm
    modulo = 'agua'
    ordering = ('-data_leitura', '-criado_em', '-id')


# === GÁS ===

class LeituraGasView(LeituraView):
    model = LeituraGas
    form_class = LeituraGasForm
    modulo = 'gas'


# === ENERGIA ===

class EventoEnergiaView(LeituraView):
    model = EventoEnergia
    form_class = EventoEnergiaForm
    modulo = 'energia'
    filtros = {'status': 'status'}
    nao_encontrado = 'Evento não encontrado'

    def get_queryset(self):
        queryset = super().get_queryset()
        resolvido = self.request.GET.get('resolvido')
        if resolvido in ('0', 'false'):
            queryset = queryset.filter(resolvido_em__isnull=True)
        elif resolvido in ('1', 'true'):
            queryset = queryset.filter(resolvido_em__isnull=False)
        return queryset


@csrf_exempt
@require_http_methods(['POST'])
@api_login_required
@requer_condominio
@requer_modulo('energia')
def resolver_evento_energia_view(request, evento_id):
    evento = EventoEnergia.objects.filter(pk=evento_id, condominio=request.condominio).first()
    if evento is None:
        return resposta_erro('Evento não encontrado', 404)

    if evento.resolvido_em is None:
        evento.resolvido_em = timezone.now()
        evento.save(update_fields=['resolvido_em'])
        logger.info(f"⚡ Evento de energia {evento.pk} resolvido por {request.user.email}")

    return resposta_ok(serializar(evento))


# === OCUPAÇÃO ===

@csrf_exempt
@require_http_methods(['GET', 'PUT'])
@api_login_required
@requer_condominio
@requer_modulo('ocupacao')
def ocupacao_view(request):
    """
    GET: dados de ocupação (ou null)
    PUT: cria ou atualiza o registro único do condomínio
    """
    ocupacao = DadosOcupacao.objects.filter(condominio=request.condominio).first()

    if request.method == 'GET':
        return JsonResponse({'success': True, 'data': serializar(ocupacao) if ocupacao else None})

    if not CondoPermissions.is_gestao(request):
        return resposta_erro(MSG_REQUER_GESTAO, 403)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    instancia = ocupacao or DadosOcupacao(
        condominio=request.condominio,
        total_unidades=request.condominio.total_unidades,
    )
    form = DadosOcupacaoForm(
        dados_para_formulario(instancia, corpo, DadosOcupacaoForm._meta.fields),
        instance=instancia,
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    ocupacao = form.save()
    logger.info(
        f"🏘️ Ocupação de {request.condominio.nome}: "
        f"{ocupacao.unidades_ocupadas}/{ocupacao.total_unidades} unidades"
    )
    return resposta_ok(serializar(ocupacao))


# === RESÍDUOS ===

@csrf_exempt
@require_http_methods(['GET', 'PATCH'])
@api_login_required
@requer_condominio
@requer_modulo('residuos')
def residuos_view(request):
    """
    GET: configuração da coleta (ou a sugerida, se ainda não houver)
    PATCH: atualização parcial, restrita a síndico ou admin
    """
    config = ConfigResiduos.objects.filter(condominio=request.condominio).first()
    if config is None:
        config = ConfigResiduos.padrao(request.condominio)

    if request.method == 'GET':
        return resposta_ok(serializar(config))

    if not CondoPermissions.is_sindico_ou_admin(request):
        return resposta_erro(MSG_REQUER_SINDICO, 403)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    form = ConfigResiduosForm(
        dados_para_formulario(config, corpo, ConfigResiduosForm._meta.fields),
        instance=config,
    )
    if not form.is_valid():
        erros = erros_formulario(form)
        for campo in ConfigResiduos.CAMPOS_LISTA:
            if campo in erros:
                return resposta_erro(erros[campo][0], 400, detalhes=erros)
        return resposta_formulario_invalido(form)

    config = form.save(commit=False)
    config.atualizado_por = request.user
    config.save()

    logger.info(f"♻️ Configuração de resíduos atualizada em {request.condominio.nome} por {request.user.email}")
    return resposta_ok(serializar(config))
