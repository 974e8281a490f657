# apps/monitoramento/forms.py

import json

from django import forms
from django.core.exceptions import ValidationError

from apps.core.forms import FormularioCondominio
from .models import (
    ConfigResiduos, DadosOcupacao, EventoEnergia, LeituraAgua, LeituraGas,
    LeituraHidrometro, LeituraPiscina, Reservatorio,
)


class LeituraPiscinaForm(FormularioCondominio):

    class Meta:
        model = LeituraPiscina
        fields = ['ph', 'cloro', 'alcalinidade', 'dureza_calcica', 'temperatura', 'observacoes']


class ReservatorioForm(FormularioCondominio):

    class Meta:
        model = Reservatorio
        fields = ['nome', 'localizacao', 'capacidade_litros']


class LeituraAguaForm(FormularioCondominio):

    class Meta:
        model = LeituraAgua
        fields = [
            'reservatorio', 'nivel', 'qualidade', 'volume_disponivel',
            'autonomia_estimada', 'status_casan', 'observacoes',
        ]


class LeituraHidrometroForm(FormularioCondominio):

    class Meta:
        model = LeituraHidrometro
        fields = ['valor', 'data_leitura', 'observacoes']


class LeituraGasForm(FormularioCondominio):

    class Meta:
        model = LeituraGas
        fields = ['nivel', 'percentual_disponivel', 'observacoes']


class EventoEnergiaForm(FormularioCondominio):
    """resolvido_em só muda pelo endpoint de resolução"""

    class Meta:
        model = EventoEnergia
        fields = ['status', 'descricao', 'observacoes']


class DadosOcupacaoForm(forms.ModelForm):

    class Meta:
        model = DadosOcupacao
        fields = [
            'total_unidades', 'unidades_ocupadas', 'media_pessoas_por_unidade',
            'consumo_medio_agua', 'consumo_medio_gas', 'consumo_medio_energia',
        ]

    def clean(self):
        cleaned_data = super().clean()
        total = cleaned_data.get('total_unidades')
        ocupadas = cleaned_data.get('unidades_ocupadas')

        if total is not None and ocupadas is not None and ocupadas > total:
            raise ValidationError('Unidades ocupadas não podem exceder o total de unidades.')

        return cleaned_data


class ConfigResiduosForm(forms.ModelForm):
    """
    Configuração da coleta

    Os campos de lista aceitam um array JSON ou uma string contendo um.
    """

    class Meta:
        model = ConfigResiduos
        fields = ConfigResiduos.CAMPOS_LISTA + ['horario_coleta']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for campo in ConfigResiduos.CAMPOS_LISTA:
            self.fields[campo].error_messages['invalid'] = f'{campo} deve ser um array JSON válido'

    def _lista(self, campo):
        valor = self.data.get(campo)
        if isinstance(valor, str):
            try:
                valor = json.loads(valor)
            except json.JSONDecodeError:
                valor = None
        if not isinstance(valor, list):
            raise ValidationError(f'{campo} deve ser um array JSON válido')
        return valor

    def clean_cronograma(self):
        return self._lista('cronograma')

    def clean_itens_organicos(self):
        return self._lista('itens_organicos')

    def clean_categorias_reciclaveis(self):
        return self._lista('categorias_reciclaveis')

    def clean_nao_reciclaveis(self):
        return self._lista('nao_reciclaveis')
