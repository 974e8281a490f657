# apps/comunicacao/models.py

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.core.models import Condominio, ModeloCondominio


class Comunicado(ModeloCondominio):
    """Comunicado do condomínio para os moradores"""

    PRIORIDADE_CHOICES = [
        ('baixa', 'Baixa'),
        ('normal', 'Normal'),
        ('alta', 'Alta'),
        ('urgente', 'Urgente'),
    ]

    titulo = models.CharField(max_length=200)
    conteudo = models.TextField()
    prioridade = models.CharField(max_length=10, choices=PRIORIDADE_CHOICES, default='normal')
    fotos = models.JSONField(default=list, blank=True)
    criado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='comunicados'
    )
    expira_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'comunicado'
        ordering = ['-criado_em']

    @property
    def expirado(self):
        return self.expira_em is not None and self.expira_em < timezone.now()

    def __str__(self):
        return self.titulo


class Notificacao(models.Model):
    """Notificação persistida para um usuário (também enviada via WebSocket)"""

    TIPO_CHOICES = [
        ('announcement_new', 'Novo comunicado'),
        ('announcement_updated', 'Comunicado atualizado'),
        ('maintenance_update', 'Atualização de manutenção'),
    ]

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notificacoes'
    )
    condominio = models.ForeignKey(
        Condominio,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='notificacoes'
    )
    tipo = models.CharField(max_length=30, choices=TIPO_CHOICES)
    titulo = models.CharField(max_length=200)
    mensagem = models.TextField()
    relacionado_id = models.CharField(max_length=50, blank=True)
    lida = models.BooleanField(default=False)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notificacao'
        ordering = ['-criado_em', '-id']
        indexes = [
            models.Index(fields=['usuario', 'lida']),
        ]

    def __str__(self):
        return f"{self.usuario} - {self.titulo}"
