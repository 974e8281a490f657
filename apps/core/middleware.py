# apps/core/middleware.py

import logging

from .auth_service import auth_service
from .utils import resposta_erro

logger = logging.getLogger(__name__)


class CondominioContextMiddleware:
    """
    Middleware que resolve usuário (JWT) e condomínio ativo da requisição

    1. Se houver `Authorization: Bearer <jwt>`, o usuário do token substitui
       o usuário de sessão. Token inválido em /api/ devolve 401.
    2. O condomínio vem do header X-Condominium-Id (ou ?condominio=) e só é
       aceito se o usuário for admin ou tiver vínculo ativo com ele.

    Depois daqui as views contam com `request.condominio` e
    `request.papel_condominio` (ambos podem ser None).
    """

    HEADER_CONDOMINIO = 'HTTP_X_CONDOMINIUM_ID'

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.condominio = None
        request.papel_condominio = None

        token = self._extrair_token(request)
        if token:
            usuario = auth_service.obter_usuario_do_token(token)
            if usuario is None:
                if request.path.startswith('/api/'):
                    return resposta_erro('Token inválido', 401)
            else:
                request.user = usuario

        if request.user.is_authenticated:
            self._resolver_condominio(request)

        response = self.get_response(request)

        # Headers de contexto
        if request.user.is_authenticated:
            response['X-User-Role'] = request.user.papel
            if request.condominio is not None:
                response['X-Condominio'] = str(request.condominio.pk)

        return response

    def _extrair_token(self, request):
        cabecalho = request.META.get('HTTP_AUTHORIZATION', '')
        if cabecalho.startswith('Bearer '):
            return cabecalho[len('Bearer '):].strip() or None
        return None

    def _resolver_condominio(self, request):
        from .models import Condominio

        condominio_id = request.META.get(self.HEADER_CONDOMINIO) or request.GET.get('condominio')
        if not condominio_id or not str(condominio_id).isdigit():
            return

        condominio = Condominio.objects.filter(pk=int(condominio_id), ativo=True).first()
        if condominio is None:
            return

        usuario = request.user
        vinculo = usuario.get_vinculo(condominio)

        if vinculo is None and not usuario.is_admin:
            logger.warning(
                f"🚫 {usuario.email} tentou acessar o condomínio {condominio_id} sem vínculo"
            )
            return

        request.condominio = condominio
        request.papel_condominio = vinculo.papel if vinculo else None
