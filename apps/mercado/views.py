# apps/mercado/views.py

import logging

from django.db.models import F
from django.utils.dateparse import parse_date
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.api import RecursoCondominioView
from apps.core.permissions import (
    api_login_required, requer_condominio, requer_modulo,
)
from apps.core.utils import (
    CorpoInvalido, converter_decimais, ler_json, resposta_erro, resposta_ok, serializar,
)
from . import services
from .forms import CategoriaForm, ProdutoForm, PromocaoForm
from .models import Categoria, Produto, Promocao, Venda

logger = logging.getLogger(__name__)


def serializar_venda(venda):
    dados = serializar(venda)
    dados['itens'] = [
        {**serializar(item), 'produto_nome': item.produto.nome}
        for item in venda.itens.select_related('produto')
    ]
    return dados


# === CATÁLOGO ===

class CategoriaView(RecursoCondominioView):
    model = Categoria
    form_class = CategoriaForm
    modulo = 'mercado'
    escrita_requer = 'gestao'
    ordering = ('ordem', 'nome')
    nao_encontrado = 'Categoria não encontrada'


class ProdutoView(RecursoCondominioView):
    """
    Produtos do mini mercado

    DELETE apenas desativa o produto (mantém o histórico de vendas).
    """

    model = Produto
    form_class = ProdutoForm
    modulo = 'mercado'
    escrita_requer = 'gestao'
    ordering = ('nome',)
    filtros = {'categoria': 'categoria_id'}
    nao_encontrado = 'Produto não encontrado'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.request.GET.get('estoque_baixo') in ('1', 'true'):
            queryset = queryset.filter(estoque_atual__lte=F('estoque_minimo'))
        if self.request.GET.get('inativos') not in ('1', 'true'):
            queryset = queryset.filter(ativo=True)
        return queryset

    def serializar(self, obj):
        dados = serializar(obj)
        dados['estoque_baixo'] = obj.estoque_baixo
        dados['preco_atual'] = float(obj.preco_atual())
        return dados

    def delete(self, request, pk=None):
        if pk is None:
            return super().delete(request, pk)

        produto = self.get_object(pk)
        if produto is None:
            return resposta_erro(self.nao_encontrado, 404)

        produto.ativo = False
        produto.save(update_fields=['ativo'])
        logger.info(f"📦 Produto {produto.nome} desativado por {request.user.email}")
        return resposta_ok()


class PromocaoView(RecursoCondominioView):
    model = Promocao
    form_class = PromocaoForm
    modulo = 'mercado'
    escrita_requer = 'gestao'
    ordering = ('-data_inicio', '-id')
    nao_encontrado = 'Promoção não encontrada'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.request.GET.get('vigentes') in ('1', 'true'):
            queryset = queryset.vigentes()
        return queryset


# === VENDAS ===

@csrf_exempt
@require_http_methods(['GET', 'POST'])
@api_login_required
@requer_condominio
@requer_modulo('mercado')
def vendas_view(request):
    """
    GET: vendas do condomínio (?data=AAAA-MM-DD)
    POST: registra uma venda a partir do carrinho
    """
    if request.method == 'GET':
        vendas = Venda.objects.filter(condominio=request.condominio).prefetch_related('itens__produto')
        data = parse_date(request.GET.get('data', '') or '')
        if data:
            vendas = vendas.filter(data_venda__date=data)

        dados = [serializar_venda(v) for v in vendas[:200]]
        return resposta_ok(dados, count=len(dados))

    try:
        corpo = ler_json(request)
    except CorpoInvalido as e:
        return resposta_erro(str(e), 400)

    try:
        venda = services.registrar_venda(request.condominio, request.user, corpo)
    except services.VendaInvalida as e:
        return resposta_erro(str(e), 400)

    return resposta_ok(serializar_venda(venda), status=201)


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('mercado')
def cashback_view(request, unidade):
    extrato = services.extrato_cashback(request.condominio, unidade)
    return resposta_ok({
        'unidade': extrato['unidade'],
        'saldo': float(extrato['saldo']),
        'movimentos': [serializar(m) for m in extrato['movimentos']],
    })


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('mercado')
def estatisticas_view(request):
    return resposta_ok(converter_decimais(services.estatisticas(request.condominio)))
