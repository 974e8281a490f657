# apps/manutencao/models.py

from django.conf import settings
from django.db import models

from apps.core.models import ModeloCondominio


class Equipamento(ModeloCondominio):
    """Equipamento ou área do condomínio sujeito a manutenção"""

    CATEGORIA_CHOICES = [
        ('eletrico', 'Elétrico'),
        ('hidraulico', 'Hidráulico'),
        ('piscina', 'Piscina'),
        ('elevadores', 'Elevadores'),
        ('cisternas', 'Cisternas'),
        ('bombas', 'Bombas'),
        ('academia', 'Academia'),
        ('brinquedoteca', 'Brinquedoteca'),
        ('pet_place', 'Pet Place'),
        ('campo', 'Campo'),
        ('portas', 'Portas'),
        ('portoes', 'Portões'),
        ('acessos', 'Acessos'),
        ('pintura', 'Pintura'),
        ('reboco', 'Reboco'),
        ('limpeza', 'Limpeza'),
        ('pisos', 'Pisos'),
        ('jardim', 'Jardim'),
    ]

    STATUS_CHOICES = [
        ('operacional', 'Operacional'),
        ('atencao', 'Atenção'),
        ('alerta', 'Alerta'),
        ('inativo', 'Inativo'),
    ]

    nome = models.CharField(max_length=200)
    categoria = models.CharField(max_length=20, choices=CATEGORIA_CHOICES)
    localizacao = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    icone = models.CharField(max_length=50, blank=True)
    fotos = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='operacional')

    class Meta:
        db_table = 'equipamento'
        ordering = ['nome']
        indexes = [
            models.Index(fields=['condominio', 'status']),
        ]

    def __str__(self):
        return f"{self.nome} ({self.get_categoria_display()})"


class ChamadoManutencao(ModeloCondominio):
    """Chamado (ticket) de manutenção aberto por um morador ou gestor"""

    STATUS_CHOICES = [
        ('aberto', 'Aberto'),
        ('em_andamento', 'Em andamento'),
        ('concluido', 'Concluído'),
    ]

    # Rótulos usados nas notificações de mudança de status
    ROTULOS_STATUS = {
        'aberto': 'Chamado Aberto',
        'em_andamento': 'Em Andamento',
        'concluido': 'Concluído',
    }

    PRIORIDADE_CHOICES = [
        ('baixa', 'Baixa'),
        ('normal', 'Normal'),
        ('alta', 'Alta'),
        ('urgente', 'Urgente'),
    ]

    equipamento = models.ForeignKey(
        Equipamento,
        on_delete=models.CASCADE,
        related_name='chamados'
    )
    titulo = models.CharField(max_length=200)
    descricao = models.TextField()
    fotos = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='aberto')
    prioridade = models.CharField(max_length=10, choices=PRIORIDADE_CHOICES, default='normal')
    solicitado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='chamados_solicitados'
    )
    atribuido_a = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='chamados_atribuidos'
    )
    atualizado_em = models.DateTimeField(auto_now=True)
    concluido_em = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'chamado_manutencao'
        ordering = ['-criado_em']
        indexes = [
            models.Index(fields=['condominio', 'status']),
        ]

    @property
    def aberto(self):
        return self.status != 'concluido'

    def __str__(self):
        return f"#{self.pk} {self.titulo} [{self.get_status_display()}]"


class ConclusaoManutencao(ModeloCondominio):
    """Registro de execução que encerra um chamado"""

    equipamento = models.ForeignKey(
        Equipamento,
        on_delete=models.CASCADE,
        related_name='conclusoes'
    )
    chamado = models.ForeignKey(
        ChamadoManutencao,
        on_delete=models.CASCADE,
        related_name='conclusoes'
    )
    descricao = models.TextField()
    localizacao = models.CharField(max_length=200, blank=True)
    fotos = models.JSONField(default=list, blank=True)
    executado_por = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='manutencoes_executadas'
    )
    nome_executor = models.CharField(max_length=200, blank=True)
    concluido_em = models.DateTimeField()

    class Meta:
        db_table = 'conclusao_manutencao'
        ordering = ['-concluido_em', '-id']

    def __str__(self):
        return f"Conclusão do chamado #{self.chamado_id}"
