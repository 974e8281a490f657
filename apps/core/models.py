# apps/core/models.py

import logging

from django.contrib.auth.models import AbstractUser
from django.db import models
from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class Condominio(models.Model):
    """
    Condomínio - unidade de multi-tenancy do sistema

    Todo dado operacional (equipamentos, leituras, funcionários, vendas...)
    pertence a exatamente um condomínio.
    """

    nome = models.CharField(max_length=200)
    endereco = models.CharField(max_length=300, blank=True)
    cidade = models.CharField(max_length=100, blank=True)
    estado = models.CharField(max_length=2, blank=True)
    cep = models.CharField(max_length=10, blank=True)
    telefone = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    total_unidades = models.PositiveIntegerField(default=0)
    logo = models.ImageField(upload_to='condominios/', blank=True, null=True)

    ativo = models.BooleanField(default=True)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'condominio'
        ordering = ['nome']

    def save(self, *args, **kwargs):
        """
        Override do save para redimensionar o logo automaticamente
        """
        super().save(*args, **kwargs)

        if self.logo:
            try:
                img = Image.open(self.logo.path)
                if img.height > 300 or img.width > 300:
                    img.thumbnail((300, 300))
                    img.save(self.logo.path)
            except (OSError, UnidentifiedImageError) as e:
                logger.warning(f"⚠️ Não foi possível redimensionar o logo de {self.nome}: {e}")

    def usuarios_ativos(self):
        """Usuários com vínculo ativo neste condomínio"""
        return Usuario.objects.filter(
            vinculos__condominio=self,
            vinculos__ativo=True,
            is_active=True,
        ).distinct()

    def modulo_habilitado(self, chave):
        """Módulo sem registro de permissão é considerado habilitado"""
        permissao = self.permissoes_modulos.filter(chave=chave).first()
        return permissao.habilitado if permissao else True

    def __str__(self):
        return self.nome


class Usuario(AbstractUser):
    """
    Modelo de usuário customizado

    O papel global define privilégios de plataforma (admin) ou o perfil
    padrão; o papel dentro de cada condomínio vem de VinculoCondominio.
    """

    PAPEL_CHOICES = [
        ('condomino', 'Condômino'),
        ('sindico', 'Síndico'),
        ('admin', 'Administrador'),
    ]

    email = models.EmailField(unique=True)
    nome = models.CharField(max_length=200, blank=True)
    papel = models.CharField(max_length=20, choices=PAPEL_CHOICES, default='condomino')
    unidade = models.CharField(max_length=20, blank=True)
    telefone = models.CharField(max_length=20, blank=True)

    # === METADADOS ===
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'usuario'
        indexes = [
            models.Index(fields=['papel']),
        ]

    @property
    def is_admin(self):
        return self.is_superuser or self.papel == 'admin'

    def get_nome_exibicao(self):
        return self.nome or self.get_full_name() or self.email or self.username

    def get_vinculo(self, condominio):
        """Retorna o vínculo ativo com o condomínio, se houver"""
        return self.vinculos.filter(condominio=condominio, ativo=True).first()

    def get_condominios_acessiveis(self):
        """
        Condomínios que o usuário pode acessar

        Admin da plataforma enxerga todos; demais apenas os vinculados.
        """
        if self.is_admin:
            return Condominio.objects.all()
        return Condominio.objects.filter(
            vinculos__usuario=self,
            vinculos__ativo=True,
        ).distinct()

    def __str__(self):
        return f"{self.get_nome_exibicao()} ({self.get_papel_display()})"


class VinculoCondominio(models.Model):
    """Associação usuário ↔ condomínio com papel local"""

    PAPEL_CHOICES = [
        ('condomino', 'Condômino'),
        ('sindico', 'Síndico'),
        ('conselheiro', 'Conselheiro'),
        ('administradora', 'Administradora'),
    ]

    PAPEIS_GESTAO = ['sindico', 'conselheiro', 'administradora']

    usuario = models.ForeignKey(
        Usuario,
        on_delete=models.CASCADE,
        related_name='vinculos'
    )
    condominio = models.ForeignKey(
        Condominio,
        on_delete=models.CASCADE,
        related_name='vinculos'
    )
    papel = models.CharField(max_length=20, choices=PAPEL_CHOICES, default='condomino')
    unidade = models.CharField(max_length=20, blank=True)
    ativo = models.BooleanField(default=True)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'vinculo_condominio'
        unique_together = ['usuario', 'condominio']
        indexes = [
            models.Index(fields=['condominio', 'ativo']),
        ]

    def __str__(self):
        return f"{self.usuario} @ {self.condominio} ({self.papel})"


class PermissaoModulo(models.Model):
    """Liga/desliga módulos opcionais por condomínio"""

    MODULOS = [
        ('manutencoes', 'Manutenções'),
        ('piscina', 'Piscina'),
        ('agua', 'Água'),
        ('gas', 'Gás'),
        ('energia', 'Energia'),
        ('residuos', 'Resíduos'),
        ('ocupacao', 'Ocupação'),
        ('documentos', 'Documentos'),
        ('fornecedores', 'Fornecedores'),
        ('comunicados', 'Comunicados'),
        ('rh', 'Recursos Humanos'),
        ('mercado', 'Mini Mercado'),
        ('equipe', 'Gestão de Equipe'),
    ]

    condominio = models.ForeignKey(
        Condominio,
        on_delete=models.CASCADE,
        related_name='permissoes_modulos'
    )
    chave = models.CharField(max_length=30, choices=MODULOS)
    rotulo = models.CharField(max_length=100)
    habilitado = models.BooleanField(default=True)
    atualizado_por = models.ForeignKey(
        Usuario,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'permissao_modulo'
        unique_together = ['condominio', 'chave']
        ordering = ['chave']

    @classmethod
    def rotulo_de(cls, chave):
        return dict(cls.MODULOS).get(chave)

    def __str__(self):
        estado = 'on' if self.habilitado else 'off'
        return f"{self.condominio} - {self.chave} [{estado}]"


class ModeloCondominio(models.Model):
    """
    Classe abstrata base para todos os registros de um condomínio

    Concentra a chave de tenant e o carimbo de criação.
    """

    condominio = models.ForeignKey(
        Condominio,
        on_delete=models.CASCADE,
        related_name='%(app_label)s_%(class)s_set'
    )
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        abstract = True
