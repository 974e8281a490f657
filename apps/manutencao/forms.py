# apps/manutencao/forms.py

from django import forms
from django.utils import timezone

from apps.core.forms import FormularioCondominio
from .models import ChamadoManutencao, ConclusaoManutencao, Equipamento


class EquipamentoForm(FormularioCondominio):

    class Meta:
        model = Equipamento
        fields = ['nome', 'categoria', 'localizacao', 'descricao', 'icone', 'fotos', 'status']

    def clean_fotos(self):
        return self.clean_lista_json('fotos')


class ChamadoForm(FormularioCondominio):
    """Abertura de chamado (status sempre nasce 'aberto')"""

    class Meta:
        model = ChamadoManutencao
        fields = ['equipamento', 'titulo', 'descricao', 'fotos', 'prioridade', 'atribuido_a']

    def clean_fotos(self):
        return self.clean_lista_json('fotos')


class StatusChamadoForm(forms.Form):
    """Único campo alterável de um chamado existente"""

    status = forms.ChoiceField(
        choices=ChamadoManutencao.STATUS_CHOICES,
        error_messages={
            'required': 'Informe o status.',
            'invalid_choice': 'Status inválido.',
        }
    )


class ConclusaoForm(FormularioCondominio):
    """Registro de conclusão de um chamado"""

    concluido_em = forms.DateTimeField(required=False)

    class Meta:
        model = ConclusaoManutencao
        fields = ['descricao', 'localizacao', 'fotos', 'nome_executor', 'concluido_em']

    def clean_fotos(self):
        return self.clean_lista_json('fotos')

    def clean_concluido_em(self):
        return self.cleaned_data.get('concluido_em') or timezone.now()
