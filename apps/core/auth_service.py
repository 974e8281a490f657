# apps/core/auth_service.py

"""
Serviço de Autenticação - Encapsula login, emissão e validação de JWT

As views da API e o consumer de WebSocket usam a mesma instância
(`auth_service`), de modo que a regra de "token válido + usuário ativo"
fica em um único lugar.
"""

import logging
from datetime import timedelta
from typing import Dict, Optional, Tuple

from django.conf import settings
from django.contrib.auth import authenticate
from django.core.cache import cache
from django.utils import timezone
from jose import JWTError, jwt

from .models import Usuario

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Serviço encapsulado para autenticação da API

    - Login por email e senha com bloqueio após tentativas falhas
    - Tokens JWT assinados (sub, email, role, exp)
    - Resolução do usuário a partir do token
    """

    def __init__(self):
        self._max_login_attempts = 5
        self._lockout_duration_minutes = 15

    def fazer_login(self, email: str, password: str) -> Tuple[bool, str, Optional[Dict]]:
        """
        Autentica por email/senha e emite um token

        Returns:
            Tuple[sucesso, mensagem, payload] onde payload = {token, user}
        """
        if self._conta_esta_bloqueada(email):
            logger.warning(f"🔒 Login bloqueado por excesso de tentativas: {email}")
            return False, "Conta temporariamente bloqueada por muitas tentativas incorretas", None

        usuario = self._autenticar_usuario(email, password)

        if not usuario:
            self._registrar_tentativa_falha(email)
            return False, "Credenciais inválidas", None

        self._resetar_tentativas_login(email)
        self._atualizar_ultimo_acesso(usuario)

        logger.info(f"✅ Login via API: {usuario.email}")
        return True, f"Bem-vindo, {usuario.get_nome_exibicao()}!", {
            'token': self.gerar_token(usuario),
            'user': self.dados_usuario(usuario),
        }

    def gerar_token(self, usuario: Usuario) -> str:
        """Emite JWT com validade de CONDO_JWT_EXPIRATION_HOURS"""
        expira_em = timezone.now() + timedelta(hours=settings.CONDO_JWT_EXPIRATION_HOURS)
        payload = {
            'sub': str(usuario.pk),
            'email': usuario.email,
            'role': usuario.papel,
            'exp': int(expira_em.timestamp()),
        }
        return jwt.encode(payload, settings.CONDO_JWT_SECRET, algorithm=settings.CONDO_JWT_ALGORITHM)

    def decodificar_token(self, token: str) -> Optional[Dict]:
        """Valida assinatura e expiração; None se inválido"""
        try:
            return jwt.decode(token, settings.CONDO_JWT_SECRET, algorithms=[settings.CONDO_JWT_ALGORITHM])
        except JWTError as e:
            logger.warning(f"⚠️ JWT rejeitado: {e}")
            return None

    def obter_usuario_do_token(self, token: str) -> Optional[Usuario]:
        """
        Resolve o usuário do token

        Busca por `sub` e, se não encontrar, pelo email do token.
        Usuários inativos nunca são retornados.
        """
        payload = self.decodificar_token(token)
        if not payload:
            return None

        usuario = None
        sub = payload.get('sub')
        if sub and str(sub).isdigit():
            usuario = Usuario.objects.filter(pk=int(sub)).first()

        if usuario is None and payload.get('email'):
            usuario = Usuario.objects.filter(email=payload['email']).first()

        if usuario is None or not usuario.is_active:
            return None

        return usuario

    @staticmethod
    def dados_usuario(usuario: Usuario) -> Dict:
        return {
            'id': usuario.pk,
            'email': usuario.email,
            'role': usuario.papel,
            'name': usuario.get_nome_exibicao(),
        }

    # =================== MÉTODOS PRIVADOS ===================

    def _autenticar_usuario(self, email: str, password: str) -> Optional[Usuario]:
        """Autentica pelo email (o username pode ser diferente)"""
        user_obj = Usuario.objects.filter(email__iexact=email, is_active=True).first()
        if not user_obj:
            return None
        return authenticate(username=user_obj.username, password=password)

    def _chave_tentativas(self, email: str) -> str:
        return f"login_tentativas:{email.lower()}"

    def _conta_esta_bloqueada(self, email: str) -> bool:
        return cache.get(self._chave_tentativas(email), 0) >= self._max_login_attempts

    def _registrar_tentativa_falha(self, email: str):
        chave = self._chave_tentativas(email)
        tentativas = cache.get(chave, 0) + 1
        cache.set(chave, tentativas, self._lockout_duration_minutes * 60)
        logger.warning(f"⚠️ Tentativa de login falhada para: {email} ({tentativas})")

    def _resetar_tentativas_login(self, email: str):
        cache.delete(self._chave_tentativas(email))

    def _atualizar_ultimo_acesso(self, usuario: Usuario):
        usuario.last_login = timezone.now()
        usuario.save(update_fields=['last_login'])


# Instância global do serviço (Singleton pattern)
auth_service = AuthenticationService()
