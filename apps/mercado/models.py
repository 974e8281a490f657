# apps/mercado/models.py

from decimal import ROUND_HALF_UP, Decimal

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone

from apps.core.models import ModeloCondominio

CENTAVO = Decimal('0.01')


class Categoria(ModeloCondominio):

    nome = models.CharField(max_length=100)
    icone = models.CharField(max_length=50, blank=True)
    cor = models.CharField(max_length=7, default='#3B82F6')
    ordem = models.PositiveIntegerField(default=0)
    ativo = models.BooleanField(default=True)

    class Meta:
        db_table = 'mercado_categoria'
        ordering = ['ordem', 'nome']

    def __str__(self):
        return self.nome


class Produto(ModeloCondominio):
    """Produto do catálogo (a exclusão pela API apenas desativa)"""

    categoria = models.ForeignKey(
        Categoria,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='produtos'
    )
    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    codigo_barras = models.CharField(max_length=50, blank=True)
    unidade = models.CharField(max_length=10, default='un')
    preco_custo = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    preco_venda = models.DecimalField(
        max_digits=10, decimal_places=2,
        validators=[MinValueValidator(CENTAVO)]
    )
    estoque_atual = models.IntegerField(default=0)
    estoque_minimo = models.IntegerField(default=5)
    estoque_maximo = models.IntegerField(default=100)
    destaque = models.BooleanField(default=False)
    ativo = models.BooleanField(default=True)

    class Meta:
        db_table = 'mercado_produto'
        ordering = ['nome']

    @property
    def estoque_baixo(self):
        return self.estoque_atual <= self.estoque_minimo

    def preco_atual(self, hoje=None):
        """Menor preço entre o de venda e as promoções vigentes"""
        precos = [self.preco_venda]
        for promocao in self.promocoes.vigentes(hoje):
            precos.append(promocao.preco_para(self))
        return min(precos)

    def __str__(self):
        return self.nome


class PromocaoQuerySet(models.QuerySet):

    def vigentes(self, hoje=None):
        hoje = hoje or timezone.localdate()
        return self.filter(ativo=True, data_inicio__lte=hoje, data_fim__gte=hoje)


class Promocao(ModeloCondominio):
    """
    Promoção de um produto

    Vale o preço promocional fixo quando informado; senão, o desconto
    percentual sobre o preço de venda.
    """

    produto = models.ForeignKey(
        Produto,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='promocoes'
    )
    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    desconto_percentual = models.DecimalField(
        max_digits=5, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
    )
    preco_promocional = models.DecimalField(
        max_digits=10, decimal_places=2, null=True, blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    data_inicio = models.DateField()
    data_fim = models.DateField()
    ativo = models.BooleanField(default=True)

    objects = PromocaoQuerySet.as_manager()

    class Meta:
        db_table = 'mercado_promocao'
        ordering = ['-data_inicio', '-id']

    def preco_para(self, produto):
        if self.preco_promocional is not None:
            return self.preco_promocional
        if self.desconto_percentual:
            fator = 1 - self.desconto_percentual / 100
            return (produto.preco_venda * fator).quantize(CENTAVO, rounding=ROUND_HALF_UP)
        return produto.preco_venda

    def __str__(self):
        return self.titulo


class Venda(ModeloCondominio):

    FORMA_PAGAMENTO_CHOICES = [
        ('pix', 'PIX'),
        ('cartao_credito', 'Cartão de crédito'),
        ('cartao_debito', 'Cartão de débito'),
        ('dinheiro', 'Dinheiro'),
        ('cashback', 'Cashback'),
    ]

    STATUS_CHOICES = [
        ('concluida', 'Concluída'),
        ('cancelada', 'Cancelada'),
    ]

    unidade = models.CharField(max_length=20, blank=True)
    morador_nome = models.CharField(max_length=200, blank=True)
    subtotal = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    desconto = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    total = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    forma_pagamento = models.CharField(max_length=20, choices=FORMA_PAGAMENTO_CHOICES, default='pix')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='concluida')
    observacoes = models.TextField(blank=True)
    data_venda = models.DateTimeField(default=timezone.now)
    vendido_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='vendas_mercado'
    )

    class Meta:
        db_table = 'mercado_venda'
        ordering = ['-data_venda', '-id']
        indexes = [
            models.Index(fields=['condominio', 'data_venda']),
        ]

    def __str__(self):
        return f"Venda #{self.pk} - R$ {self.total}"


class ItemVenda(models.Model):

    venda = models.ForeignKey(Venda, on_delete=models.CASCADE, related_name='itens')
    produto = models.ForeignKey(Produto, on_delete=models.PROTECT, related_name='itens_vendidos')
    quantidade = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    preco_unitario = models.DecimalField(max_digits=10, decimal_places=2)
    total = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = 'mercado_item_venda'

    def __str__(self):
        return f"{self.quantidade}x {self.produto}"


class CashbackQuerySet(models.QuerySet):

    def validos(self, hoje=None):
        """Créditos não expirados e todos os resgates"""
        hoje = hoje or timezone.localdate()
        return self.filter(Q(tipo='resgate') | Q(data_expiracao__isnull=True) | Q(data_expiracao__gte=hoje))


class Cashback(ModeloCondominio):
    """Movimento de cashback de uma unidade (crédito por compra ou resgate)"""

    TIPO_CHOICES = [
        ('compra', 'Compra'),
        ('resgate', 'Resgate'),
    ]

    unidade = models.CharField(max_length=20)
    morador_nome = models.CharField(max_length=200, blank=True)
    tipo = models.CharField(max_length=10, choices=TIPO_CHOICES, default='compra')
    valor = models.DecimalField(max_digits=10, decimal_places=2)
    descricao = models.CharField(max_length=200, blank=True)
    venda = models.ForeignKey(
        Venda,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='cashbacks'
    )
    data_expiracao = models.DateField(null=True, blank=True)

    objects = CashbackQuerySet.as_manager()

    class Meta:
        db_table = 'mercado_cashback'
        ordering = ['-criado_em', '-id']
        indexes = [
            models.Index(fields=['condominio', 'unidade']),
        ]

    def __str__(self):
        return f"{self.unidade} {self.tipo} R$ {self.valor}"
