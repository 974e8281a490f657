# apps/monitoramento/models.py

import copy
from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from apps.core.models import Condominio, ModeloCondominio


def _faixa(minimo, maximo):
    return [MinValueValidator(Decimal(minimo)), MaxValueValidator(Decimal(maximo))]


class LeituraComAutor(ModeloCondominio):
    """Base das leituras manuais: quem registrou e observações"""

    observacoes = models.TextField(blank=True)
    registrado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )

    class Meta:
        abstract = True
        ordering = ['-criado_em', '-id']


# === PISCINA ===

class LeituraPiscina(LeituraComAutor):
    """Análise da água da piscina"""

    ph = models.DecimalField(max_digits=4, decimal_places=2, validators=_faixa(0, 14))
    cloro = models.DecimalField(max_digits=5, decimal_places=2, validators=_faixa(0, 10))
    alcalinidade = models.DecimalField(max_digits=6, decimal_places=2, validators=_faixa(0, 500))
    dureza_calcica = models.DecimalField(max_digits=7, decimal_places=2, validators=_faixa(0, 1000))
    temperatura = models.DecimalField(max_digits=4, decimal_places=1, validators=_faixa(0, 50))

    class Meta(LeituraComAutor.Meta):
        db_table = 'leitura_piscina'

    def __str__(self):
        return f"Piscina pH {self.ph} / cloro {self.cloro} ({self.criado_em:%d/%m/%Y})"


# === ÁGUA ===

class Reservatorio(ModeloCondominio):
    """Caixa d'água ou cisterna"""

    nome = models.CharField(max_length=100)
    localizacao = models.CharField(max_length=200, blank=True)
    capacidade_litros = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = 'reservatorio'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} ({self.capacidade_litros} L)"


class LeituraAgua(LeituraComAutor):
    """Nível e qualidade da água de um reservatório"""

    QUALIDADE_CHOICES = [
        ('boa', 'Boa'),
        ('regular', 'Regular'),
        ('ruim', 'Ruim'),
    ]

    STATUS_CASAN_CHOICES = [
        ('normal', 'Normal'),
        ('intermitente', 'Intermitente'),
        ('interrompido', 'Interrompido'),
    ]

    reservatorio = models.ForeignKey(
        Reservatorio,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='leituras'
    )
    nivel = models.DecimalField(max_digits=5, decimal_places=2, validators=_faixa(0, 100))
    qualidade = models.CharField(max_length=20, choices=QUALIDADE_CHOICES, default='boa')
    volume_disponivel = models.DecimalField(
        max_digits=12, decimal_places=2, default=0,
        validators=[MinValueValidator(Decimal('0'))]
    )
    autonomia_estimada = models.CharField(max_length=50, blank=True)
    status_casan = models.CharField(max_length=20, choices=STATUS_CASAN_CHOICES, default='normal')

    class Meta(LeituraComAutor.Meta):
        db_table = 'leitura_agua'

    def __str__(self):
        return f"Água {self.nivel}% ({self.criado_em:%d/%m/%Y})"


class LeituraHidrometro(LeituraComAutor):
    """Leitura do hidrômetro geral"""

    valor = models.DecimalField(
        max_digits=12, decimal_places=3,
        validators=[MinValueValidator(Decimal('0'))]
    )
    data_leitura = models.DateField(default=timezone.localdate)

    class Meta(LeituraComAutor.Meta):
        db_table = 'leitura_hidrometro'

    def __str__(self):
        return f"Hidrômetro {self.valor} m³ em {self.data_leitura:%d/%m/%Y}"


# === GÁS ===

class LeituraGas(LeituraComAutor):

    nivel = models.DecimalField(max_digits=5, decimal_places=2, validators=_faixa(0, 100))
    percentual_disponivel = models.DecimalField(max_digits=5, decimal_places=2, validators=_faixa(0, 100))

    class Meta(LeituraComAutor.Meta):
        db_table = 'leitura_gas'

    def __str__(self):
        return f"Gás {self.percentual_disponivel}% ({self.criado_em:%d/%m/%Y})"


# === ENERGIA ===

class EventoEnergia(LeituraComAutor):
    """Ocorrência no fornecimento de energia"""

    STATUS_CHOICES = [
        ('ok', 'Normal'),
        ('falta_energia', 'Falta de energia'),
        ('meia_fase', 'Meia fase'),
    ]

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ok')
    descricao = models.TextField(blank=True)
    resolvido_em = models.DateTimeField(null=True, blank=True)

    class Meta(LeituraComAutor.Meta):
        db_table = 'evento_energia'

    @property
    def resolvido(self):
        return self.resolvido_em is not None

    def __str__(self):
        return f"{self.get_status_display()} ({self.criado_em:%d/%m/%Y %H:%M})"


# === OCUPAÇÃO ===

class DadosOcupacao(models.Model):
    """
    Dados de ocupação do condomínio (um registro por condomínio)

    Unidades vagas e população estimada são derivadas no save().
    """

    condominio = models.OneToOneField(
        Condominio,
        on_delete=models.CASCADE,
        related_name='ocupacao'
    )
    total_unidades = models.PositiveIntegerField(default=0)
    unidades_ocupadas = models.PositiveIntegerField(default=0)
    unidades_vagas = models.PositiveIntegerField(default=0, editable=False)
    media_pessoas_por_unidade = models.DecimalField(
        max_digits=4, decimal_places=2, default=Decimal('2.5'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    populacao_estimada = models.PositiveIntegerField(default=0, editable=False)

    # Consumos médios por unidade (água m³, gás kg, energia kWh)
    consumo_medio_agua = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    consumo_medio_gas = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    consumo_medio_energia = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'dados_ocupacao'
        verbose_name_plural = 'Dados de ocupação'

    def calcular_derivados(self):
        self.unidades_vagas = max(self.total_unidades - self.unidades_ocupadas, 0)
        populacao = Decimal(self.unidades_ocupadas) * Decimal(self.media_pessoas_por_unidade)
        self.populacao_estimada = int(populacao.quantize(Decimal('1'), rounding=ROUND_HALF_UP))

    def save(self, *args, **kwargs):
        self.calcular_derivados()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"Ocupação {self.condominio}: {self.unidades_ocupadas}/{self.total_unidades}"


# === RESÍDUOS ===

RESIDUOS_PADRAO = {
    'cronograma': [
        {'dia': 'Segunda', 'organico': True, 'reciclavel': False},
        {'dia': 'Terça', 'organico': False, 'reciclavel': True},
        {'dia': 'Quarta', 'organico': True, 'reciclavel': False},
        {'dia': 'Quinta', 'organico': False, 'reciclavel': True},
        {'dia': 'Sexta', 'organico': True, 'reciclavel': False},
        {'dia': 'Sábado', 'organico': False, 'reciclavel': True},
    ],
    'itens_organicos': [
        'Restos de alimentos',
        'Cascas de frutas e vegetais',
        'Borra de café e saquinhos de chá',
        'Guardanapos e papel toalha usados',
        'Folhas e podas de jardim',
    ],
    'categorias_reciclaveis': [
        {'categoria': 'Papel', 'itens': ['Jornais', 'Revistas', 'Caixas de papelão']},
        {'categoria': 'Plástico', 'itens': ['Garrafas PET', 'Embalagens limpas', 'Potes']},
        {'categoria': 'Metal', 'itens': ['Latas de alumínio', 'Latas de aço', 'Tampas metálicas']},
        {'categoria': 'Vidro', 'itens': ['Garrafas', 'Potes', 'Frascos']},
    ],
    'nao_reciclaveis': [
        'Papel higiênico e fraldas',
        'Espelhos e vidros quebrados',
        'Cerâmicas e porcelanas',
        'Isopor sujo',
    ],
    'horario_coleta': '07:00',
}


class ConfigResiduos(models.Model):
    """Cronograma e orientações da coleta de lixo (um por condomínio)"""

    CAMPOS_LISTA = ['cronograma', 'itens_organicos', 'categorias_reciclaveis', 'nao_reciclaveis']

    condominio = models.OneToOneField(
        Condominio,
        on_delete=models.CASCADE,
        related_name='config_residuos'
    )
    cronograma = models.JSONField(default=list, blank=True)
    itens_organicos = models.JSONField(default=list, blank=True)
    categorias_reciclaveis = models.JSONField(default=list, blank=True)
    nao_reciclaveis = models.JSONField(default=list, blank=True)
    horario_coleta = models.CharField(max_length=5, default='07:00')
    atualizado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'config_residuos'
        verbose_name_plural = 'Configurações de resíduos'

    @classmethod
    def padrao(cls, condominio):
        """Configuração inicial (não salva) com o cronograma sugerido"""
        return cls(condominio=condominio, **copy.deepcopy(RESIDUOS_PADRAO))

    def __str__(self):
        return f"Resíduos - {self.condominio}"
