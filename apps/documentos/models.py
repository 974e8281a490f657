# apps/documentos/models.py

from datetime import timedelta

from django.conf import settings
from django.db import models
from django.utils import timezone

from apps.core.models import ModeloCondominio


class DocumentoQuerySet(models.QuerySet):

    def vencendo(self, dias=None, hoje=None):
        """Documentos com validade até hoje + janela de alerta (inclui vencidos)"""
        dias = settings.CONDO_DOCUMENTOS_ALERTA_DIAS if dias is None else dias
        hoje = hoje or timezone.localdate()
        return self.filter(
            data_validade__isnull=False,
            data_validade__lte=hoje + timedelta(days=dias),
        )


class Documento(ModeloCondominio):
    """Documento legal ou contrato com data de validade"""

    TIPO_CHOICES = [
        ('avcb', 'AVCB'),
        ('alvara', 'Alvará'),
        ('dedetizacao', 'Dedetização'),
        ('limpeza_caixas', "Limpeza de caixas d'água"),
        ('certificado', 'Certificado'),
        ('contrato', 'Contrato'),
        ('outros', 'Outros'),
    ]

    nome = models.CharField(max_length=200)
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default='outros')
    arquivo_url = models.URLField(max_length=500, blank=True)
    data_validade = models.DateField(null=True, blank=True)
    observacoes = models.TextField(blank=True)
    enviado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='documentos_enviados'
    )

    objects = DocumentoQuerySet.as_manager()

    class Meta:
        db_table = 'documento'
        ordering = ['data_validade', 'nome']

    @property
    def vencido(self):
        return self.data_validade is not None and self.data_validade < timezone.localdate()

    def dias_para_vencer(self, hoje=None):
        if self.data_validade is None:
            return None
        return (self.data_validade - (hoje or timezone.localdate())).days

    def __str__(self):
        return f"{self.nome} ({self.get_tipo_display()})"


class Fornecedor(ModeloCondominio):
    """Prestador de serviço ou fornecedor do condomínio"""

    nome = models.CharField(max_length=200)
    categoria = models.CharField(max_length=100)
    icone = models.CharField(max_length=50, blank=True)
    telefone = models.CharField(max_length=20, blank=True)
    whatsapp = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    endereco = models.CharField(max_length=300, blank=True)
    observacoes = models.TextField(blank=True)

    class Meta:
        db_table = 'fornecedor'
        ordering = ['nome']
        verbose_name_plural = 'Fornecedores'

    def __str__(self):
        return f"{self.nome} - {self.categoria}"
