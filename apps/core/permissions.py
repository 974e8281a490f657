# apps/core/permissions.py

from functools import wraps

from .utils import resposta_erro


class CondoPermissions:
    """
    Sistema de permissões da API

    Combina o papel global do usuário (admin, síndico, condômino) com o
    papel no condomínio ativo, resolvido pelo CondominioContextMiddleware.
    """

    @staticmethod
    def is_admin(user):
        """Admin da plataforma"""
        return user.is_authenticated and user.is_admin

    @staticmethod
    def is_sindico_no_condominio(request):
        return getattr(request, 'papel_condominio', None) == 'sindico'

    @staticmethod
    def is_sindico_ou_admin(request):
        user = request.user
        if not user.is_authenticated:
            return False
        if user.is_admin or user.papel == 'sindico':
            return True
        return CondoPermissions.is_sindico_no_condominio(request)

    @staticmethod
    def is_gestao(request):
        """Síndico, conselheiro ou administradora no condomínio (ou admin)"""
        from .models import VinculoCondominio

        user = request.user
        if not user.is_authenticated:
            return False
        if CondoPermissions.is_sindico_ou_admin(request):
            return True
        return getattr(request, 'papel_condominio', None) in VinculoCondominio.PAPEIS_GESTAO

    @staticmethod
    def pode_acessar_condominio(user, condominio):
        if not user.is_authenticated:
            return False
        if user.is_admin:
            return True
        return user.get_vinculo(condominio) is not None

    @staticmethod
    def modulo_habilitado(request, chave):
        condominio = getattr(request, 'condominio', None)
        return condominio is not None and condominio.modulo_habilitado(chave)


# === MENSAGENS PADRÃO ===

MSG_TOKEN_AUSENTE = 'Token ausente'
MSG_SEM_CONDOMINIO = 'Condomínio não selecionado'
MSG_REQUER_ADMIN = 'Acesso negado: requer permissão de administrador'
MSG_REQUER_SINDICO = 'Acesso negado: requer permissão de síndico ou administrador'
MSG_REQUER_GESTAO = 'Acesso negado: requer perfil de gestão'
MSG_MODULO_DESABILITADO = 'Módulo desabilitado para este condomínio'


# Decoradores para views da API (sempre respondem JSON, nunca redirecionam)

def api_login_required(view_func):
    """Decorador que requer usuário autenticado (JWT ou sessão)"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return resposta_erro(MSG_TOKEN_AUSENTE, 401)
        return view_func(request, *args, **kwargs)

    return wrapped_view


def requer_condominio(view_func):
    """Decorador que requer condomínio ativo (header X-Condominium-Id)"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if getattr(request, 'condominio', None) is None:
            return resposta_erro(MSG_SEM_CONDOMINIO, 400)
        return view_func(request, *args, **kwargs)

    return wrapped_view


def requer_admin(view_func):
    """Decorador que requer admin da plataforma"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if not CondoPermissions.is_admin(request.user):
            return resposta_erro(MSG_REQUER_ADMIN, 403)
        return view_func(request, *args, **kwargs)

    return wrapped_view


def requer_sindico_ou_admin(view_func):
    """Decorador que requer síndico ou admin"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if not CondoPermissions.is_sindico_ou_admin(request):
            return resposta_erro(MSG_REQUER_SINDICO, 403)
        return view_func(request, *args, **kwargs)

    return wrapped_view


def requer_gestao(view_func):
    """Decorador que requer perfil de gestão no condomínio"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if not CondoPermissions.is_gestao(request):
            return resposta_erro(MSG_REQUER_GESTAO, 403)
        return view_func(request, *args, **kwargs)

    return wrapped_view


def requer_modulo(chave):
    """
    Decorador genérico que bloqueia módulos desabilitados
    Espera condomínio já resolvido (usar depois de requer_condominio)
    """

    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            if not CondoPermissions.modulo_habilitado(request, chave):
                return resposta_erro(MSG_MODULO_DESABILITADO, 403)
            return view_func(request, *args, **kwargs)

        return wrapped_view

    return decorator


# Mixin para as views de CRUD baseadas em classe

class CondominioAccessMixin:
    """
    Mixin que aplica autenticação, condomínio ativo e módulo habilitado

    Atributos de classe:
        modulo: chave de PermissaoModulo (None = sem verificação)
        escrita_requer: None, 'gestao' ou 'sindico' para POST/PATCH/PUT/DELETE
        leitura_requer: idem para GET (dados sensíveis, ex. salários)
    """

    modulo = None
    escrita_requer = None
    leitura_requer = None

    METODOS_ESCRITA = ('post', 'put', 'patch', 'delete')

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return resposta_erro(MSG_TOKEN_AUSENTE, 401)

        if getattr(request, 'condominio', None) is None:
            return resposta_erro(MSG_SEM_CONDOMINIO, 400)

        if self.modulo and not CondoPermissions.modulo_habilitado(request, self.modulo):
            return resposta_erro(MSG_MODULO_DESABILITADO, 403)

        if request.method.lower() in self.METODOS_ESCRITA:
            requer = self.escrita_requer
        else:
            requer = self.leitura_requer

        if requer == 'gestao' and not CondoPermissions.is_gestao(request):
            return resposta_erro(MSG_REQUER_GESTAO, 403)
        if requer == 'sindico' and not CondoPermissions.is_sindico_ou_admin(request):
            return resposta_erro(MSG_REQUER_SINDICO, 403)

        return super().dispatch(request, *args, **kwargs)
