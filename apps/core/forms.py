# apps/core/forms.py

from django import forms
from django.core.exceptions import ValidationError
from django.db.models import Q

from .models import Condominio, Usuario, VinculoCondominio


class LoginForm(forms.Form):
    """Formulário de login da API (email + senha)"""

    email = forms.EmailField(
        error_messages={'required': 'Email e senha são obrigatórios'},
    )
    password = forms.CharField(
        strip=False,
        error_messages={'required': 'Email e senha são obrigatórios'},
    )


class FormularioCondominio(forms.ModelForm):
    """
    ModelForm base dos recursos de um condomínio

    Restringe toda chave estrangeira a registros do mesmo condomínio,
    impedindo que um POST aponte para dados de outro tenant.
    """

    def __init__(self, *args, condominio=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.condominio = condominio

        if condominio is None:
            return

        for field in self.fields.values():
            if not isinstance(field, forms.ModelChoiceField):
                continue

            modelo = field.queryset.model
            if modelo is Usuario:
                field.queryset = Usuario.objects.filter(
                    Q(vinculos__condominio=condominio) | Q(papel='admin')
                ).distinct()
            elif any(f.name == 'condominio' for f in modelo._meta.fields):
                field.queryset = field.queryset.filter(condominio=condominio)

    def clean_lista_json(self, campo):
        """JSONField de lista: vazio vira [] e não-lista é rejeitado"""
        valor = self.cleaned_data.get(campo)
        if valor in (None, ''):
            return []
        if not isinstance(valor, list):
            raise ValidationError('Informe uma lista.')
        return valor


class CondominioForm(forms.ModelForm):
    """Cadastro de condomínio (apenas admin da plataforma)"""

    class Meta:
        model = Condominio
        fields = [
            'nome', 'endereco', 'cidade', 'estado', 'cep',
            'telefone', 'email', 'total_unidades', 'ativo',
        ]

    def clean_estado(self):
        estado = self.cleaned_data.get('estado', '')
        return estado.upper()

    def clean_nome(self):
        nome = self.cleaned_data['nome'].strip()
        if len(nome) < 3:
            raise ValidationError('Nome deve ter pelo menos 3 caracteres.')
        return nome


class VinculoCondominioForm(forms.ModelForm):
    """Vínculo usuário ↔ condomínio"""

    class Meta:
        model = VinculoCondominio
        fields = ['usuario', 'condominio', 'papel', 'unidade', 'ativo']

    def clean(self):
        cleaned_data = super().clean()
        usuario = cleaned_data.get('usuario')
        condominio = cleaned_data.get('condominio')

        if usuario and condominio and self.instance.pk is None:
            if VinculoCondominio.objects.filter(usuario=usuario, condominio=condominio).exists():
                raise ValidationError('Usuário já vinculado a este condomínio.')

        return cleaned_data
