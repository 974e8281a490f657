# apps/mercado/forms.py

from django.core.exceptions import ValidationError

from apps.core.forms import FormularioCondominio
from .models import Categoria, Produto, Promocao


class CategoriaForm(FormularioCondominio):

    class Meta:
        model = Categoria
        fields = ['nome', 'icone', 'cor', 'ordem', 'ativo']


class ProdutoForm(FormularioCondominio):

    class Meta:
        model = Produto
        fields = [
            'categoria', 'nome', 'descricao', 'codigo_barras', 'unidade',
            'preco_custo', 'preco_venda', 'estoque_atual', 'estoque_minimo',
            'estoque_maximo', 'destaque', 'ativo',
        ]

    def clean_estoque_atual(self):
        estoque = self.cleaned_data.get('estoque_atual') or 0
        if estoque < 0:
            raise ValidationError('Estoque não pode ser negativo.')
        return estoque


class PromocaoForm(FormularioCondominio):

    class Meta:
        model = Promocao
        fields = [
            'produto', 'titulo', 'descricao', 'desconto_percentual',
            'preco_promocional', 'data_inicio', 'data_fim', 'ativo',
        ]

    def clean(self):
        cleaned_data = super().clean()
        inicio = cleaned_data.get('data_inicio')
        fim = cleaned_data.get('data_fim')

        if inicio and fim and inicio > fim:
            raise ValidationError('Data de início deve ser anterior ou igual à data de fim.')

        return cleaned_data
