# apps/rh/models.py

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import ModeloCondominio


class Funcionario(ModeloCondominio):
    """
    Funcionário contratado pelo condomínio

    A matrícula é gerada na criação no formato FUNC-0001, sequencial
    dentro de cada condomínio.
    """

    TIPO_CONTRATO_CHOICES = [
        ('clt', 'CLT'),
        ('pj', 'PJ'),
        ('estagiario', 'Estagiário'),
        ('temporario', 'Temporário'),
    ]

    STATUS_CHOICES = [
        ('ativo', 'Ativo'),
        ('afastado', 'Afastado'),
        ('ferias', 'Férias'),
        ('demitido', 'Demitido'),
    ]

    # === DADOS PESSOAIS ===
    nome = models.CharField(max_length=200)
    cpf = models.CharField(max_length=14, blank=True)
    rg = models.CharField(max_length=20, blank=True)
    data_nascimento = models.DateField(null=True, blank=True)
    telefone = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)

    # === ENDEREÇO ===
    endereco = models.CharField(max_length=300, blank=True)
    cidade = models.CharField(max_length=100, blank=True)
    estado = models.CharField(max_length=2, blank=True)
    cep = models.CharField(max_length=10, blank=True)

    # === CONTRATO ===
    matricula = models.CharField(max_length=20, blank=True, editable=False)
    funcao = models.CharField(max_length=100)
    departamento = models.CharField(max_length=100, blank=True)
    data_admissao = models.DateField(null=True, blank=True)
    data_demissao = models.DateField(null=True, blank=True)
    tipo_contrato = models.CharField(max_length=20, choices=TIPO_CONTRATO_CHOICES, default='clt')
    carga_horaria_semanal = models.PositiveSmallIntegerField(default=44)
    salario_base = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )

    # === BENEFÍCIOS ===
    vale_transporte = models.DecimalField(max_digits=8, decimal_places=2, default=Decimal('0'))
    vale_refeicao = models.DecimalField(max_digits=8, decimal_places=2, default=Decimal('0'))
    vale_alimentacao = models.DecimalField(max_digits=8, decimal_places=2, default=Decimal('0'))
    plano_saude = models.DecimalField(max_digits=8, decimal_places=2, default=Decimal('0'))

    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ativo')
    observacoes = models.TextField(blank=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'funcionario'
        ordering = ['nome']
        unique_together = ['condominio', 'matricula']
        indexes = [
            models.Index(fields=['condominio', 'status']),
        ]

    def save(self, *args, **kwargs):
        if not self.matricula:
            self.matricula = self.gerar_matricula()
        super().save(*args, **kwargs)

    def gerar_matricula(self):
        """Próxima matrícula livre do condomínio (total existente + 1)"""
        existentes = Funcionario.objects.filter(condominio_id=self.condominio_id)
        numero = existentes.count() + 1
        while existentes.filter(matricula=f'FUNC-{numero:04d}').exists():
            numero += 1
        return f'FUNC-{numero:04d}'

    def __str__(self):
        return f"{self.matricula} - {self.nome}"
