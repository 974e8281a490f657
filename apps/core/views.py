# apps/core/views.py

import logging

from django.core.cache import cache
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps import __version__
from .auth_service import auth_service
from .forms import CondominioForm, LoginForm, VinculoCondominioForm
from .models import Condominio, PermissaoModulo, Usuario, VinculoCondominio
from .permissions import (
    CondoPermissions, MSG_REQUER_SINDICO, api_login_required, requer_admin,
    requer_condominio, requer_sindico_ou_admin,
)
from .utils import (
    CorpoInvalido, dados_para_formulario, ler_json, resposta_erro,
    resposta_formulario_invalido, resposta_ok, serializar,
)

logger = logging.getLogger(__name__)


def _serializar_condominio(condominio):
    return serializar(condominio)


def _pode_gerir_condominio(usuario, condominio):
    """Admin, ou síndico com vínculo ativo naquele condomínio"""
    if usuario.is_admin:
        return True
    vinculo = usuario.get_vinculo(condominio)
    if vinculo is None:
        return False
    return vinculo.papel == 'sindico' or usuario.papel == 'sindico'


# === AUTENTICAÇÃO ===

@csrf_exempt
@require_http_methods(['POST'])
def login_view(request):
    """
    Login da API

    A lógica de autenticação e emissão do token fica no auth_service;
    a view só traduz para HTTP.
    """
    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    form = LoginForm(corpo)
    if not form.is_valid():
        if 'email' in form.errors and form.data.get('email'):
            return resposta_formulario_invalido(form)
        return resposta_erro('Email e senha são obrigatórios', 400)

    sucesso, mensagem, payload = auth_service.fazer_login(
        form.cleaned_data['email'], form.cleaned_data['password']
    )

    if not sucesso:
        return resposta_erro(mensagem, 401)

    return JsonResponse({'success': True, 'message': mensagem, **payload})


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
def me_view(request):
    dados = auth_service.dados_usuario(request.user)
    dados['condominios'] = [
        {
            'id': vinculo.condominio_id,
            'nome': vinculo.condominio.nome,
            'papel': vinculo.papel,
            'unidade': vinculo.unidade,
        }
        for vinculo in request.user.vinculos.filter(ativo=True).select_related('condominio')
    ]
    return resposta_ok(dados)


# === CONDOMÍNIOS ===

@csrf_exempt
@require_http_methods(['GET', 'POST'])
@api_login_required
def condominios_view(request):
    """
    GET: condomínios acessíveis ao usuário
    POST: cria condomínio (admin da plataforma)
    """
    if request.method == 'GET':
        condominios = request.user.get_condominios_acessiveis().order_by('nome')
        dados = [_serializar_condominio(c) for c in condominios]
        return resposta_ok(dados, count=len(dados))

    if not CondoPermissions.is_admin(request.user):
        return resposta_erro('Acesso negado: requer permissão de administrador', 403)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    form = CondominioForm(dados_para_formulario(Condominio(), corpo, CondominioForm._meta.fields))
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    condominio = form.save()
    logger.info(f"🏢 Condomínio criado: {condominio.nome} por {request.user.email}")
    return resposta_ok(_serializar_condominio(condominio), status=201)


@csrf_exempt
@require_http_methods(['GET', 'PATCH', 'DELETE'])
@api_login_required
def condominio_detalhe_view(request, condominio_id):
    condominio = Condominio.objects.filter(pk=condominio_id).first()
    if condominio is None or not CondoPermissions.pode_acessar_condominio(request.user, condominio):
        return resposta_erro('Condomínio não encontrado', 404)

    if request.method == 'GET':
        return resposta_ok(_serializar_condominio(condominio))

    if not CondoPermissions.is_admin(request.user):
        return resposta_erro('Acesso negado: requer permissão de administrador', 403)

    if request.method == 'DELETE':
        condominio.delete()
        logger.info(f"🗑️ Condomínio {condominio_id} excluído por {request.user.email}")
        return resposta_ok()

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    form = CondominioForm(
        dados_para_formulario(condominio, corpo, CondominioForm._meta.fields),
        instance=condominio,
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    condominio = form.save()
    return resposta_ok(_serializar_condominio(condominio))


# === VÍNCULOS USUÁRIO ↔ CONDOMÍNIO ===

@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
def condominio_usuarios_view(request, condominio_id):
    condominio = Condominio.objects.filter(pk=condominio_id).first()
    if condominio is None:
        return resposta_erro('Condomínio não encontrado', 404)

    if not _pode_gerir_condominio(request.user, condominio):
        return resposta_erro(MSG_REQUER_SINDICO, 403)

    vinculos = condominio.vinculos.select_related('usuario').order_by('usuario__nome')
    dados = [
        {
            **serializar(vinculo),
            'usuario_nome': vinculo.usuario.get_nome_exibicao(),
            'usuario_email': vinculo.usuario.email,
        }
        for vinculo in vinculos
    ]
    return resposta_ok(dados, count=len(dados))


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
def usuario_condominios_view(request, usuario_id):
    if request.user.pk != usuario_id and not CondoPermissions.is_admin(request.user):
        return resposta_erro('Acesso negado: requer permissão de administrador', 403)

    vinculos = VinculoCondominio.objects.filter(usuario_id=usuario_id).select_related('condominio')
    dados = [
        {**serializar(vinculo), 'condominio_nome': vinculo.condominio.nome}
        for vinculo in vinculos
    ]
    return resposta_ok(dados, count=len(dados))


@csrf_exempt
@require_http_methods(['POST'])
@api_login_required
def vinculo_criar_view(request):
    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    form = VinculoCondominioForm(
        dados_para_formulario(VinculoCondominio(), corpo, VinculoCondominioForm._meta.fields)
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    if not _pode_gerir_condominio(request.user, form.cleaned_data['condominio']):
        return resposta_erro(MSG_REQUER_SINDICO, 403)

    vinculo = form.save()
    logger.info(f"🔗 {vinculo.usuario.email} vinculado a {vinculo.condominio.nome} como {vinculo.papel}")
    return resposta_ok(serializar(vinculo), status=201)


@csrf_exempt
@require_http_methods(['PATCH'])
@api_login_required
def vinculo_atualizar_view(request, vinculo_id):
    vinculo = VinculoCondominio.objects.select_related('condominio').filter(pk=vinculo_id).first()
    if vinculo is None:
        return resposta_erro('Vínculo não encontrado', 404)

    if not _pode_gerir_condominio(request.user, vinculo.condominio):
        return resposta_erro(MSG_REQUER_SINDICO, 403)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    # Usuário e condomínio de um vínculo não mudam
    corpo.pop('usuario', None)
    corpo.pop('condominio', None)

    form = VinculoCondominioForm(
        dados_para_formulario(vinculo, corpo, VinculoCondominioForm._meta.fields),
        instance=vinculo,
    )
    if not form.is_valid():
        return resposta_formulario_invalido(form)

    return resposta_ok(serializar(form.save()))


@csrf_exempt
@require_http_methods(['DELETE'])
@api_login_required
def vinculo_remover_view(request, usuario_id, condominio_id):
    vinculo = VinculoCondominio.objects.select_related('condominio').filter(
        usuario_id=usuario_id, condominio_id=condominio_id
    ).first()
    if vinculo is None:
        return resposta_erro('Vínculo não encontrado', 404)

    if not _pode_gerir_condominio(request.user, vinculo.condominio):
        return resposta_erro(MSG_REQUER_SINDICO, 403)

    vinculo.delete()
    return resposta_ok()


# === PERMISSÕES DE MÓDULOS ===

@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
def permissoes_modulos_view(request):
    """
    Lista todos os módulos conhecidos

    Módulos sem registro aparecem como habilitados.
    """
    existentes = {p.chave: p for p in request.condominio.permissoes_modulos.all()}

    dados = []
    for chave, rotulo in PermissaoModulo.MODULOS:
        permissao = existentes.get(chave)
        dados.append({
            'chave': chave,
            'rotulo': rotulo,
            'habilitado': permissao.habilitado if permissao else True,
            'atualizado_em': permissao.atualizado_em if permissao else None,
        })

    return resposta_ok(dados, count=len(dados))


@csrf_exempt
@require_http_methods(['PATCH'])
@api_login_required
@requer_condominio
@requer_sindico_ou_admin
def permissao_modulo_atualizar_view(request, chave):
    rotulo = PermissaoModulo.rotulo_de(chave)
    if rotulo is None:
        return resposta_erro('Módulo não encontrado', 404)

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    habilitado = corpo.get('habilitado')
    if not isinstance(habilitado, bool):
        return resposta_erro('habilitado deve ser booleano', 400)

    permissao, _ = PermissaoModulo.objects.update_or_create(
        condominio=request.condominio,
        chave=chave,
        defaults={
            'rotulo': rotulo,
            'habilitado': habilitado,
            'atualizado_por': request.user,
        },
    )

    logger.info(
        f"🧩 Módulo {chave} {'habilitado' if habilitado else 'desabilitado'} "
        f"em {request.condominio.nome} por {request.user.email}"
    )
    return resposta_ok(serializar(permissao))


# === MONITORAMENTO ===

@require_http_methods(['GET'])
def health_check(request):
    """
    Health check para monitoramento (sem autenticação)
    """
    try:
        Usuario.objects.exists()

        cache.set('health_check', 'ok', 60)
        cache.get('health_check')

        status = {
            'status': 'healthy',
            'database': 'ok',
            'cache': 'ok',
            'timestamp': timezone.now().isoformat(),
            'version': __version__,
        }

        return JsonResponse(status)

    except Exception as e:
        logger.error(f"❌ Health check falhou: {e}")
        status = {
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': timezone.now().isoformat(),
            'version': __version__,
        }

        return JsonResponse(status, status=500)
