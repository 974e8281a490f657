# apps/documentos/forms.py

from apps.core.forms import FormularioCondominio
from .models import Documento, Fornecedor


class DocumentoForm(FormularioCondominio):

    class Meta:
        model = Documento
        fields = ['nome', 'tipo', 'arquivo_url', 'data_validade', 'observacoes']


class FornecedorForm(FormularioCondominio):

    class Meta:
        model = Fornecedor
        fields = ['nome', 'categoria', 'icone', 'telefone', 'whatsapp', 'email', 'endereco', 'observacoes']

    def clean_whatsapp(self):
        # Guarda apenas os dígitos
        return ''.join(c for c in self.cleaned_data.get('whatsapp', '') if c.isdigit())
