# apps/mercado/services.py

"""
Regras de negócio do mini mercado

Uma venda é registrada numa única transação: itens, baixa de estoque e
cashback entram juntos ou nenhum entra.
"""

import logging
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List

from django.conf import settings
from django.db import transaction
from django.db.models import Count, F, Sum
from django.utils import timezone

from .models import CENTAVO, Cashback, ItemVenda, Produto, Promocao, Venda

logger = logging.getLogger(__name__)

ZERO = Decimal('0')


class VendaInvalida(ValueError):
    """Carrinho ou pagamento rejeitado; a mensagem vai para o cliente"""


def percentual_cashback() -> Decimal:
    return Decimal(str(settings.CONDO_CASHBACK_PERCENTUAL)) / 100


def calcular_cashback(total) -> Decimal:
    return (Decimal(total) * percentual_cashback()).quantize(CENTAVO, rounding=ROUND_HALF_UP)


def saldo_cashback(condominio, unidade: str, hoje=None) -> Decimal:
    """Créditos não expirados menos resgates (nunca negativo)"""
    movimentos = Cashback.objects.filter(condominio=condominio, unidade=unidade).validos(hoje)
    creditos = movimentos.filter(tipo='compra').aggregate(total=Sum('valor'))['total'] or ZERO
    resgates = movimentos.filter(tipo='resgate').aggregate(total=Sum('valor'))['total'] or ZERO
    return max(creditos - resgates, ZERO)


def _ler_itens(condominio, itens) -> List[Dict]:
    """Valida o carrinho e resolve os produtos (travados para atualização)"""
    if not itens:
        raise VendaInvalida('Carrinho vazio')
    if not isinstance(itens, list):
        raise VendaInvalida('itens deve ser uma lista')

    linhas = []
    produtos = {}
    for item in itens:
        if not isinstance(item, dict):
            raise VendaInvalida('Item inválido no carrinho')

        try:
            produto_id = int(item.get('produto'))
            quantidade = item.get('quantidade', 1)
            if isinstance(quantidade, bool) or (isinstance(quantidade, float) and not quantidade.is_integer()):
                raise ValueError(quantidade)
            quantidade = int(quantidade)
        except (TypeError, ValueError):
            raise VendaInvalida('Item inválido no carrinho')

        if quantidade <= 0:
            raise VendaInvalida('Quantidade deve ser maior que zero')

        # Linhas repetidas do mesmo produto usam a mesma instância
        produto = produtos.get(produto_id)
        if produto is None:
            produto = Produto.objects.select_for_update().filter(
                pk=produto_id, condominio=condominio, ativo=True
            ).first()
            if produto is None:
                raise VendaInvalida(f'Produto {produto_id} não encontrado')
            produtos[produto_id] = produto

        linhas.append({'produto': produto, 'quantidade': quantidade})

    return linhas


def registrar_venda(condominio, usuario, dados: Dict, hoje=None) -> Venda:
    """
    Registra uma venda completa

    Args:
        dados: {unidade?, morador_nome?, forma_pagamento, observacoes?,
                itens: [{produto, quantidade}]}

    Raises:
        VendaInvalida: carrinho vazio, produto inexistente/inativo ou
            saldo de cashback insuficiente
    """
    hoje = hoje or timezone.localdate()
    forma_pagamento = dados.get('forma_pagamento') or 'pix'
    if forma_pagamento not in dict(Venda.FORMA_PAGAMENTO_CHOICES):
        raise VendaInvalida('Forma de pagamento inválida')

    unidade = (dados.get('unidade') or '').strip()
    morador_nome = (dados.get('morador_nome') or '').strip()

    with transaction.atomic():
        linhas = _ler_itens(condominio, dados.get('itens'))

        subtotal = ZERO
        for linha in linhas:
            linha['preco_unitario'] = linha['produto'].preco_atual(hoje)
            linha['total'] = linha['preco_unitario'] * linha['quantidade']
            subtotal += linha['total']

        total = subtotal

        if forma_pagamento == 'cashback':
            if not unidade:
                raise VendaInvalida('Informe a unidade para pagar com cashback')
            if saldo_cashback(condominio, unidade, hoje) < total:
                raise VendaInvalida('Saldo de cashback insuficiente')

        venda = Venda.objects.create(
            condominio=condominio,
            unidade=unidade,
            morador_nome=morador_nome,
            subtotal=subtotal,
            total=total,
            forma_pagamento=forma_pagamento,
            observacoes=dados.get('observacoes') or '',
            vendido_por=usuario,
        )

        ItemVenda.objects.bulk_create([
            ItemVenda(
                venda=venda,
                produto=linha['produto'],
                quantidade=linha['quantidade'],
                preco_unitario=linha['preco_unitario'],
                total=linha['total'],
            )
            for linha in linhas
        ])

        for linha in linhas:
            produto = linha['produto']
            produto.estoque_atual = max(0, produto.estoque_atual - linha['quantidade'])
            produto.save(update_fields=['estoque_atual'])

        if unidade and forma_pagamento == 'cashback':
            Cashback.objects.create(
                condominio=condominio,
                unidade=unidade,
                morador_nome=morador_nome,
                tipo='resgate',
                valor=total,
                descricao=f'Resgate na venda #{venda.pk}',
                venda=venda,
            )
        elif unidade:
            Cashback.objects.create(
                condominio=condominio,
                unidade=unidade,
                morador_nome=morador_nome,
                tipo='compra',
                valor=calcular_cashback(total),
                descricao=f'Cashback {settings.CONDO_CASHBACK_PERCENTUAL}% da compra',
                venda=venda,
                data_expiracao=hoje + timedelta(days=settings.CONDO_CASHBACK_VALIDADE_DIAS),
            )

    logger.info(
        f"🛒 Venda #{venda.pk} registrada em {condominio.nome}: "
        f"{len(linhas)} itens, R$ {venda.total} ({forma_pagamento})"
    )
    return venda


def estatisticas(condominio, hoje=None) -> Dict:
    """Indicadores do mês corrente e do dia"""
    hoje = hoje or timezone.localdate()
    inicio_mes = hoje.replace(day=1)

    vendas = Venda.objects.filter(condominio=condominio, status='concluida')
    mes = vendas.filter(data_venda__date__gte=inicio_mes).aggregate(
        quantidade=Count('id'), total=Sum('total')
    )
    dia = vendas.filter(data_venda__date=hoje).aggregate(
        quantidade=Count('id'), total=Sum('total')
    )

    total_mes = mes['total'] or ZERO
    ticket_medio = (total_mes / mes['quantidade']).quantize(CENTAVO) if mes['quantidade'] else ZERO

    return {
        'vendas_mes': mes['quantidade'],
        'total_mes': total_mes,
        'ticket_medio': ticket_medio,
        'cashback_gerado': calcular_cashback(total_mes),
        'produtos_estoque_baixo': Produto.objects.filter(
            condominio=condominio, ativo=True, estoque_atual__lte=F('estoque_minimo')
        ).count(),
        'promocoes_ativas': Promocao.objects.filter(condominio=condominio).vigentes(hoje).count(),
        'vendas_hoje': dia['quantidade'],
        'total_hoje': dia['total'] or ZERO,
    }


def extrato_cashback(condominio, unidade: str, hoje=None) -> Dict:
    movimentos = Cashback.objects.filter(condominio=condominio, unidade=unidade)
    return {
        'unidade': unidade,
        'saldo': saldo_cashback(condominio, unidade, hoje),
        'movimentos': list(movimentos),
    }
