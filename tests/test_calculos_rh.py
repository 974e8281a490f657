# tests/test_calculos_rh.py

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from apps.rh.calculos import (
    TETO_INSS, calcular_custo_mensal, calcular_fgts, calcular_folha, calcular_inss,
    calcular_irrf, calcular_passivo_trabalhista, meses_entre,
)


def funcionario(salario, admissao=None, **beneficios):
    return SimpleNamespace(
        salario_base=Decimal(salario),
        data_admissao=admissao,
        vale_transporte=Decimal(beneficios.get('vale_transporte', '0')),
        vale_refeicao=Decimal(beneficios.get('vale_refeicao', '0')),
        vale_alimentacao=Decimal(beneficios.get('vale_alimentacao', '0')),
        plano_saude=Decimal(beneficios.get('plano_saude', '0')),
    )


class TestINSS:

    @pytest.mark.parametrize('salario, esperado', [
        ('1412.00', Decimal('105.90')),
        ('2500.00', Decimal('203.82')),
        ('3000.00', Decimal('258.82')),
    ])
    def test_faixas_progressivas(self, salario, esperado):
        assert calcular_inss(salario)['valor'] == esperado

    def test_percentual_efetivo(self):
        assert calcular_inss('2500.00')['percentual'] == Decimal('8.15')

    def test_acima_do_teto(self):
        assert calcular_inss('10000.00')['valor'] == TETO_INSS

    def test_salario_zero(self):
        assert calcular_inss(0) == {'valor': Decimal('0'), 'percentual': Decimal('0')}


class TestIRRF:

    def test_isento(self):
        assert calcular_irrf('2000.00', '150.00')['valor'] == Decimal('0')

    def test_segunda_faixa(self):
        # base = 3000 - 258,82 = 2741,18 -> 7,5% - 158,40
        assert calcular_irrf('3000.00', '258.82')['valor'] == Decimal('47.19')

    def test_ultima_faixa(self):
        # base = 10000 - 908,86 = 9091,14 -> 27,5% - 884,96
        assert calcular_irrf('10000.00', TETO_INSS)['valor'] == Decimal('1615.10')


def test_fgts():
    assert calcular_fgts('2500.00') == {'valor': Decimal('200.00'), 'percentual': Decimal('8')}


class TestMesesEntre:

    def test_meses_completos(self):
        assert meses_entre(date(2022, 1, 10), date(2024, 7, 10)) == 30

    def test_mes_incompleto_nao_conta(self):
        assert meses_entre(date(2024, 1, 31), date(2024, 2, 29)) == 0

    def test_datas_invertidas(self):
        assert meses_entre(date(2024, 5, 1), date(2024, 1, 1)) == 0


class TestPassivo:

    def test_rescisao_com_dois_anos_e_meio(self):
        passivo = calcular_passivo_trabalhista(
            Decimal('2400.00'), date(2022, 1, 10), hoje=date(2024, 7, 10)
        )

        assert passivo['tempo_servico_anos'] == 2
        assert passivo['tempo_servico_meses'] == 30
        assert passivo['ferias_proporcionais'] == Decimal('1596.00')
        assert passivo['decimo_terceiro_proporcional'] == Decimal('1200.00')
        assert passivo['saldo_fgts'] == Decimal('5760.00')
        assert passivo['multa_fgts'] == Decimal('2304.00')
        assert passivo['dias_aviso_previo'] == 36
        assert passivo['aviso_previo'] == Decimal('2880.00')
        assert passivo['total'] == Decimal('13740.00')

    def test_aviso_previo_limitado_a_90_dias(self):
        passivo = calcular_passivo_trabalhista(
            Decimal('3000.00'), date(1990, 1, 1), hoje=date(2024, 1, 1)
        )

        assert passivo['dias_aviso_previo'] == 90

    def test_sem_admissao(self):
        passivo = calcular_passivo_trabalhista(Decimal('3000.00'), None)

        assert passivo['total'] == Decimal('0')
        assert passivo['tempo_servico_meses'] == 0


def test_custo_mensal():
    # 2000 + 28% encargos + provisões (166,67 + 221,67) + 100 de VT
    assert calcular_custo_mensal(funcionario('2000.00', vale_transporte='100')) == Decimal('3048.33')


def test_folha_completa():
    folha = calcular_folha(funcionario('3000.00', date(2024, 1, 15)), hoje=date(2024, 7, 15))

    assert folha['inss']['valor'] == Decimal('258.82')
    assert folha['irrf']['valor'] == Decimal('47.19')
    assert folha['fgts']['valor'] == Decimal('240.00')
    assert folha['salario_liquido'] == Decimal('2693.99')
    assert folha['passivo']['tempo_servico_meses'] == 6
