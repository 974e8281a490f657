# apps/equipe/models.py

from django.conf import settings
from django.db import models

from apps.core.models import ModeloCondominio

PRIORIDADE_CHOICES = [
    ('baixa', 'Baixa'),
    ('normal', 'Normal'),
    ('alta', 'Alta'),
    ('urgente', 'Urgente'),
]


class MembroEquipe(ModeloCondominio):
    """Integrante da equipe operacional (zelador, porteiro...)"""

    FUNCAO_CHOICES = [
        ('zelador', 'Zelador'),
        ('porteiro', 'Porteiro'),
        ('faxineiro', 'Faxineiro'),
        ('jardineiro', 'Jardineiro'),
        ('tecnico', 'Técnico'),
        ('administrativo', 'Administrativo'),
        ('seguranca', 'Segurança'),
        ('outro', 'Outro'),
    ]

    STATUS_CHOICES = [
        ('ativo', 'Ativo'),
        ('inativo', 'Inativo'),
        ('ferias', 'Férias'),
        ('afastado', 'Afastado'),
    ]

    nome = models.CharField(max_length=200)
    cpf = models.CharField(max_length=14, blank=True)
    funcao = models.CharField(max_length=20, choices=FUNCAO_CHOICES, default='outro')
    departamento = models.CharField(max_length=100, blank=True)
    telefone = models.CharField(max_length=20, blank=True)
    whatsapp = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    jornada = models.CharField(max_length=100, blank=True)
    data_contratacao = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='ativo')
    observacoes = models.TextField(blank=True)

    class Meta:
        db_table = 'membro_equipe'
        ordering = ['nome']

    def __str__(self):
        return f"{self.nome} ({self.get_funcao_display()})"


class Processo(ModeloCondominio):
    """Rotina operacional recorrente (ronda, limpeza da piscina...)"""

    CATEGORIA_CHOICES = [
        ('limpeza', 'Limpeza'),
        ('seguranca', 'Segurança'),
        ('manutencao', 'Manutenção'),
        ('administrativo', 'Administrativo'),
        ('jardinagem', 'Jardinagem'),
        ('piscina', 'Piscina'),
        ('portaria', 'Portaria'),
        ('outro', 'Outro'),
    ]

    FREQUENCIA_CHOICES = [
        ('diario', 'Diário'),
        ('semanal', 'Semanal'),
        ('quinzenal', 'Quinzenal'),
        ('mensal', 'Mensal'),
        ('trimestral', 'Trimestral'),
        ('semestral', 'Semestral'),
        ('anual', 'Anual'),
        ('sob_demanda', 'Sob demanda'),
    ]

    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    categoria = models.CharField(max_length=20, choices=CATEGORIA_CHOICES, default='outro')
    frequencia = models.CharField(max_length=20, choices=FREQUENCIA_CHOICES, default='diario')
    responsavel = models.ForeignKey(
        MembroEquipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='processos'
    )
    blocos = models.JSONField(default=list, blank=True)
    andares = models.JSONField(default=list, blank=True)
    equipamentos = models.JSONField(default=list, blank=True)
    roteiro = models.TextField(blank=True)
    checklist = models.JSONField(default=list, blank=True)
    duracao_estimada = models.PositiveIntegerField(null=True, blank=True, help_text='Minutos')
    ativo = models.BooleanField(default=True)

    class Meta:
        db_table = 'processo'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class ExecucaoProcesso(ModeloCondominio):

    STATUS_CHOICES = [
        ('pendente', 'Pendente'),
        ('em_andamento', 'Em andamento'),
        ('concluido', 'Concluído'),
    ]

    processo = models.ForeignKey(Processo, on_delete=models.CASCADE, related_name='execucoes')
    executado_por = models.ForeignKey(
        MembroEquipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='execucoes'
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pendente')
    iniciado_em = models.DateTimeField(null=True, blank=True)
    concluido_em = models.DateTimeField(null=True, blank=True)
    checklist_resultado = models.JSONField(default=list, blank=True)
    observacoes = models.TextField(blank=True)

    class Meta:
        db_table = 'execucao_processo'
        ordering = ['-criado_em', '-id']

    def __str__(self):
        return f"{self.processo} [{self.get_status_display()}]"


class ModeloAtividade(ModeloCondominio):
    """Template de atividade usado para montar listas"""

    categoria = models.CharField(max_length=50, blank=True)
    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    funcao = models.CharField(max_length=20, choices=MembroEquipe.FUNCAO_CHOICES, blank=True)
    area = models.CharField(max_length=100, blank=True)
    instrucoes = models.TextField(blank=True)
    equipamentos_necessarios = models.JSONField(default=list, blank=True)
    checklist = models.JSONField(default=list, blank=True)
    tempo_estimado = models.PositiveIntegerField(null=True, blank=True, help_text='Minutos')
    ordem = models.PositiveIntegerField(default=0)
    ativo = models.BooleanField(default=True)

    class Meta:
        db_table = 'modelo_atividade'
        ordering = ['ordem', 'titulo']

    def __str__(self):
        return self.titulo


class ListaAtividades(ModeloCondominio):
    """Lista de atividades de um membro para um dia/turno"""

    TURNO_CHOICES = [
        ('manha', 'Manhã'),
        ('tarde', 'Tarde'),
        ('noite', 'Noite'),
        ('integral', 'Integral'),
    ]

    STATUS_CHOICES = [
        ('pendente', 'Pendente'),
        ('em_andamento', 'Em andamento'),
        ('concluida', 'Concluída'),
    ]

    titulo = models.CharField(max_length=200)
    membro = models.ForeignKey(MembroEquipe, on_delete=models.CASCADE, related_name='listas')
    data_execucao = models.DateField()
    turno = models.CharField(max_length=10, choices=TURNO_CHOICES, default='manha')
    prioridade = models.CharField(max_length=10, choices=PRIORIDADE_CHOICES, default='normal')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pendente')
    observacoes = models.TextField(blank=True)
    enviado_whatsapp = models.BooleanField(default=False)
    data_envio_whatsapp = models.DateTimeField(null=True, blank=True)
    criado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='listas_atividades'
    )

    class Meta:
        db_table = 'lista_atividades'
        ordering = ['-data_execucao', '-id']

    def __str__(self):
        return self.titulo


class ItemListaAtividade(models.Model):
    """Atividade de uma lista, copiada do modelo no momento da criação"""

    lista = models.ForeignKey(ListaAtividades, on_delete=models.CASCADE, related_name='itens')
    modelo = models.ForeignKey(
        ModeloAtividade,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    titulo = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    area = models.CharField(max_length=100, blank=True)
    instrucoes = models.TextField(blank=True)
    tempo_estimado = models.PositiveIntegerField(null=True, blank=True)
    concluido = models.BooleanField(default=False)
    data_conclusao = models.DateTimeField(null=True, blank=True)
    ordem = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = 'item_lista_atividade'
        ordering = ['ordem', 'id']

    def __str__(self):
        return self.titulo
