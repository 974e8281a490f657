# tests/test_mercado.py

from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.mercado import services
from apps.mercado.models import Cashback, Categoria, Produto, Promocao, Venda


@pytest.fixture
def hoje():
    return timezone.localdate()


@pytest.fixture
def agua(condominio):
    categoria = Categoria.objects.create(condominio=condominio, nome='Bebidas')
    return Produto.objects.create(
        condominio=condominio, categoria=categoria, nome='Água 500ml',
        preco_custo=Decimal('1.00'), preco_venda=Decimal('3.00'), estoque_atual=10,
    )


def carrinho(produto, quantidade=1, **extra):
    return {'itens': [{'produto': produto.pk, 'quantidade': quantidade}], **extra}


@pytest.mark.django_db
class TestPrecos:

    def test_sem_promocao(self, agua, hoje):
        assert agua.preco_atual(hoje) == Decimal('3.00')

    def test_desconto_percentual(self, agua, hoje):
        Promocao.objects.create(
            condominio=agua.condominio, produto=agua, titulo='Verão',
            desconto_percentual=Decimal('20'), data_inicio=hoje, data_fim=hoje,
        )

        assert agua.preco_atual(hoje) == Decimal('2.40')

    def test_menor_preco_entre_promocoes(self, agua, hoje):
        Promocao.objects.create(
            condominio=agua.condominio, produto=agua, titulo='Verão',
            desconto_percentual=Decimal('20'), data_inicio=hoje, data_fim=hoje,
        )
        Promocao.objects.create(
            condominio=agua.condominio, produto=agua, titulo='Queima',
            preco_promocional=Decimal('2.00'), data_inicio=hoje, data_fim=hoje,
        )

        assert agua.preco_atual(hoje) == Decimal('2.00')

    def test_promocao_fora_do_periodo_nao_vale(self, agua, hoje):
        Promocao.objects.create(
            condominio=agua.condominio, produto=agua, titulo='Passada',
            preco_promocional=Decimal('1.00'),
            data_inicio=hoje - timedelta(days=10), data_fim=hoje - timedelta(days=1),
        )

        assert agua.preco_atual(hoje) == Decimal('3.00')


@pytest.mark.django_db
class TestRegistrarVenda:

    def test_venda_baixa_estoque_e_gera_cashback(self, condominio, sindico, agua, hoje):
        venda = services.registrar_venda(
            condominio, sindico, carrinho(agua, 2, unidade='302', morador_nome='Ana'), hoje=hoje
        )

        assert venda.total == Decimal('6.00')
        assert venda.itens.get().preco_unitario == Decimal('3.00')

        agua.refresh_from_db()
        assert agua.estoque_atual == 8

        cashback = Cashback.objects.get(venda=venda)
        assert cashback.tipo == 'compra'
        assert cashback.valor == Decimal('0.18')
        assert cashback.data_expiracao == hoje + timedelta(days=90)

    def test_venda_sem_unidade_nao_gera_cashback(self, condominio, sindico, agua, hoje):
        services.registrar_venda(condominio, sindico, carrinho(agua), hoje=hoje)

        assert not Cashback.objects.exists()

    def test_estoque_nunca_fica_negativo(self, condominio, sindico, agua, hoje):
        services.registrar_venda(condominio, sindico, carrinho(agua, 15), hoje=hoje)

        agua.refresh_from_db()
        assert agua.estoque_atual == 0

    def test_produto_repetido_no_carrinho_baixa_todas_as_linhas(self, condominio, sindico, agua, hoje):
        venda = services.registrar_venda(condominio, sindico, {
            'itens': [
                {'produto': agua.pk, 'quantidade': 2},
                {'produto': agua.pk, 'quantidade': 3},
            ],
        }, hoje=hoje)

        assert venda.total == Decimal('15.00')
        assert venda.itens.count() == 2

        agua.refresh_from_db()
        assert agua.estoque_atual == 5

    @pytest.mark.parametrize('quantidade', [1.5, '2.5', True])
    def test_quantidade_fracionada_e_rejeitada(self, condominio, sindico, agua, quantidade):
        with pytest.raises(services.VendaInvalida, match='Item inválido no carrinho'):
            services.registrar_venda(condominio, sindico, {
                'itens': [{'produto': agua.pk, 'quantidade': quantidade}],
            })

        agua.refresh_from_db()
        assert agua.estoque_atual == 10
        assert not Venda.objects.exists()

    def test_quantidade_inteira_em_float_e_aceita(self, condominio, sindico, agua, hoje):
        venda = services.registrar_venda(condominio, sindico, {
            'itens': [{'produto': agua.pk, 'quantidade': 2.0}],
        }, hoje=hoje)

        assert venda.itens.get().quantidade == 2

    def test_carrinho_vazio(self, condominio, sindico):
        with pytest.raises(services.VendaInvalida, match='Carrinho vazio'):
            services.registrar_venda(condominio, sindico, {'itens': []})

    def test_produto_inativo(self, condominio, sindico, agua):
        agua.ativo = False
        agua.save()

        with pytest.raises(services.VendaInvalida, match=f'Produto {agua.pk} não encontrado'):
            services.registrar_venda(condominio, sindico, carrinho(agua))

    def test_produto_de_outro_condominio(self, outro_condominio, sindico, agua):
        with pytest.raises(services.VendaInvalida):
            services.registrar_venda(outro_condominio, sindico, carrinho(agua))

    def test_quantidade_invalida(self, condominio, sindico, agua):
        with pytest.raises(services.VendaInvalida):
            services.registrar_venda(condominio, sindico, carrinho(agua, 0))


@pytest.mark.django_db
class TestCashback:

    def test_pagamento_com_saldo_insuficiente_nao_altera_nada(self, condominio, sindico, agua, hoje):
        with pytest.raises(services.VendaInvalida, match='Saldo de cashback insuficiente'):
            services.registrar_venda(
                condominio, sindico,
                carrinho(agua, 1, unidade='302', forma_pagamento='cashback'), hoje=hoje,
            )

        agua.refresh_from_db()
        assert agua.estoque_atual == 10
        assert not Venda.objects.exists()

    def test_pagamento_com_cashback_registra_resgate(self, condominio, sindico, agua, hoje):
        Cashback.objects.create(
            condominio=condominio, unidade='302', valor=Decimal('10.00'),
            data_expiracao=hoje + timedelta(days=30),
        )

        venda = services.registrar_venda(
            condominio, sindico,
            carrinho(agua, 2, unidade='302', forma_pagamento='cashback'), hoje=hoje,
        )

        assert venda.cashbacks.get().tipo == 'resgate'
        assert services.saldo_cashback(condominio, '302', hoje) == Decimal('4.00')

    def test_credito_expirado_nao_conta(self, condominio, hoje):
        Cashback.objects.create(
            condominio=condominio, unidade='302', valor=Decimal('10.00'),
            data_expiracao=hoje - timedelta(days=1),
        )
        Cashback.objects.create(
            condominio=condominio, unidade='302', valor=Decimal('1.50'),
            data_expiracao=hoje,
        )

        assert services.saldo_cashback(condominio, '302', hoje) == Decimal('1.50')

    def test_cashback_sem_unidade(self, condominio, sindico, agua):
        with pytest.raises(services.VendaInvalida, match='Informe a unidade'):
            services.registrar_venda(condominio, sindico, carrinho(agua, forma_pagamento='cashback'))


@pytest.mark.django_db
class TestApiMercado:

    def test_registrar_venda(self, cliente_sindico, agua):
        response = cliente_sindico.post_json('/api/mercado/vendas/', carrinho(agua, 3, unidade='302'))

        assert response.status_code == 201
        dados = response.json()['data']
        assert dados['total'] == 9.0
        assert dados['itens'][0]['produto_nome'] == 'Água 500ml'

    def test_venda_invalida_vira_400(self, cliente_sindico):
        response = cliente_sindico.post_json('/api/mercado/vendas/', {'itens': []})

        assert response.status_code == 400
        assert response.json()['error'] == 'Carrinho vazio'

    def test_extrato_de_cashback(self, cliente_morador, cliente_sindico, agua):
        cliente_sindico.post_json('/api/mercado/vendas/', carrinho(agua, 10, unidade='302'))

        dados = cliente_morador.get('/api/mercado/cashback/302/').json()['data']

        assert dados['saldo'] == 0.9
        assert len(dados['movimentos']) == 1

    def test_excluir_produto_apenas_desativa(self, cliente_sindico, agua):
        response = cliente_sindico.delete(f'/api/mercado/produtos/{agua.pk}/')

        assert response.status_code == 200
        agua.refresh_from_db()
        assert agua.ativo is False
        assert cliente_sindico.get('/api/mercado/produtos/').json()['count'] == 0
        assert cliente_sindico.get('/api/mercado/produtos/?inativos=1').json()['count'] == 1

    def test_morador_nao_cadastra_produto(self, cliente_morador):
        response = cliente_morador.post_json('/api/mercado/produtos/', {
            'nome': 'Pão', 'preco_venda': '1.00',
        })

        assert response.status_code == 403

    def test_estoque_baixo(self, cliente_sindico, agua):
        agua.estoque_atual = 2
        agua.save()

        dados = cliente_sindico.get('/api/mercado/produtos/?estoque_baixo=1').json()['data']

        assert [p['nome'] for p in dados] == ['Água 500ml']
        assert dados[0]['estoque_baixo'] is True

    def test_promocao_com_periodo_invertido(self, cliente_sindico, agua):
        response = cliente_sindico.post_json('/api/mercado/promocoes/', {
            'produto': agua.pk, 'titulo': 'Errada', 'desconto_percentual': '10',
            'data_inicio': '2024-05-10', 'data_fim': '2024-05-01',
        })

        assert response.status_code == 400

    def test_estatisticas(self, cliente_sindico, agua):
        cliente_sindico.post_json('/api/mercado/vendas/', carrinho(agua, 2, unidade='302'))
        cliente_sindico.post_json('/api/mercado/vendas/', carrinho(agua, 1))

        dados = cliente_sindico.get('/api/mercado/estatisticas/').json()['data']

        assert dados['vendas_mes'] == 2
        assert dados['total_mes'] == 9.0
        assert dados['ticket_medio'] == 4.5
        assert dados['vendas_hoje'] == 2
