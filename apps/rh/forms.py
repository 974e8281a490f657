# apps/rh/forms.py

from django.core.exceptions import ValidationError

from apps.core.forms import FormularioCondominio
from .models import Funcionario


class FuncionarioForm(FormularioCondominio):

    class Meta:
        model = Funcionario
        fields = [
            'nome', 'cpf', 'rg', 'data_nascimento', 'telefone', 'email',
            'endereco', 'cidade', 'estado', 'cep',
            'funcao', 'departamento', 'data_admissao', 'data_demissao',
            'tipo_contrato', 'carga_horaria_semanal', 'salario_base',
            'vale_transporte', 'vale_refeicao', 'vale_alimentacao', 'plano_saude',
            'status', 'observacoes',
        ]

    def clean_cpf(self):
        cpf = ''.join(c for c in self.cleaned_data.get('cpf', '') if c.isdigit())
        if cpf and len(cpf) != 11:
            raise ValidationError('CPF deve ter 11 dígitos.')
        return cpf

    def clean_estado(self):
        return self.cleaned_data.get('estado', '').upper()

    def clean(self):
        cleaned_data = super().clean()
        admissao = cleaned_data.get('data_admissao')
        demissao = cleaned_data.get('data_demissao')

        if admissao and demissao and demissao < admissao:
            raise ValidationError('Data de demissão anterior à admissão.')

        return cleaned_data
