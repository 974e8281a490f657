# apps/rh/calculos.py

"""
Cálculos trabalhistas

Funções puras sobre Decimal, com arredondamento em 2 casas. Tabelas
vigentes em 2024 (INSS progressivo e IRRF mensal).
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional

CENTAVO = Decimal('0.01')
ZERO = Decimal('0')

# === TABELAS ===

# (limite superior da faixa, alíquota)
FAIXAS_INSS = [
    (Decimal('1412.00'), Decimal('0.075')),
    (Decimal('2666.68'), Decimal('0.09')),
    (Decimal('4000.03'), Decimal('0.12')),
    (Decimal('7786.02'), Decimal('0.14')),
]
TETO_INSS = Decimal('908.86')

# (limite superior da base, alíquota, parcela a deduzir); None = sem limite
FAIXAS_IRRF = [
    (Decimal('2112.00'), ZERO, ZERO),
    (Decimal('2826.65'), Decimal('0.075'), Decimal('158.40')),
    (Decimal('3751.05'), Decimal('0.15'), Decimal('370.40')),
    (Decimal('4664.68'), Decimal('0.225'), Decimal('651.73')),
    (None, Decimal('0.275'), Decimal('884.96')),
]

ALIQUOTA_FGTS = Decimal('0.08')
MULTA_FGTS = Decimal('0.4')
ALIQUOTA_INSS_PATRONAL = Decimal('0.20')
FATOR_FERIAS = Decimal('1.33')
DIAS_AVISO_BASE = 30
DIAS_AVISO_POR_ANO = 3
DIAS_AVISO_MAXIMO = 90


def _decimal(valor) -> Decimal:
    if valor is None:
        return ZERO
    if isinstance(valor, Decimal):
        return valor
    return Decimal(str(valor))


def arredondar(valor: Decimal) -> Decimal:
    return valor.quantize(CENTAVO, rounding=ROUND_HALF_UP)


def _percentual(valor: Decimal, salario: Decimal) -> Decimal:
    if salario <= 0:
        return ZERO
    return arredondar(valor / salario * 100)


def calcular_inss(salario) -> Dict[str, Decimal]:
    """
    Contribuição do empregado, progressiva por faixa

    Acima da última faixa a contribuição é o teto.
    """
    salario = _decimal(salario)
    if salario <= 0:
        return {'valor': ZERO, 'percentual': ZERO}

    if salario > FAIXAS_INSS[-1][0]:
        valor = TETO_INSS
    else:
        valor = ZERO
        anterior = ZERO
        for limite, aliquota in FAIXAS_INSS:
            if salario <= anterior:
                break
            valor += (min(salario, limite) - anterior) * aliquota
            anterior = limite
        valor = min(valor, TETO_INSS)

    valor = arredondar(valor)
    return {'valor': valor, 'percentual': _percentual(valor, salario)}


def calcular_fgts(salario) -> Dict[str, Decimal]:
    salario = _decimal(salario)
    return {'valor': arredondar(salario * ALIQUOTA_FGTS), 'percentual': Decimal('8')}


def calcular_irrf(salario, inss) -> Dict[str, Decimal]:
    """
    Imposto de renda retido na fonte

    Base = salário - INSS; nunca negativo.
    """
    salario = _decimal(salario)
    base = salario - _decimal(inss)

    valor = ZERO
    for limite, aliquota, deducao in FAIXAS_IRRF:
        if limite is None or base <= limite:
            valor = base * aliquota - deducao
            break

    valor = arredondar(max(valor, ZERO))
    return {'valor': valor, 'percentual': _percentual(valor, salario)}


def meses_entre(inicio: date, fim: date) -> int:
    """Meses completos entre duas datas"""
    meses = (fim.year - inicio.year) * 12 + (fim.month - inicio.month)
    if fim.day < inicio.day:
        meses -= 1
    return max(meses, 0)


def calcular_passivo_trabalhista(salario, data_admissao: Optional[date], hoje: Optional[date] = None) -> Dict:
    """
    Projeção do custo de uma rescisão sem justa causa na data de hoje

    Férias e 13º proporcionais ao ano corrente de trabalho, saldo do FGTS
    com multa de 40% e aviso prévio de 30 dias + 3 por ano (máx. 90).
    """
    salario = _decimal(salario)

    if data_admissao is None or salario <= 0:
        return {
            'tempo_servico_anos': 0,
            'tempo_servico_meses': 0,
            'ferias_proporcionais': ZERO,
            'decimo_terceiro_proporcional': ZERO,
            'saldo_fgts': ZERO,
            'multa_fgts': ZERO,
            'dias_aviso_previo': 0,
            'aviso_previo': ZERO,
            'total': ZERO,
        }

    hoje = hoje or date.today()
    meses = meses_entre(data_admissao, hoje)
    anos = meses // 12
    fracao_ano = Decimal(meses % 12) / 12

    ferias = fracao_ano * salario * FATOR_FERIAS
    decimo_terceiro = fracao_ano * salario
    saldo_fgts = salario * ALIQUOTA_FGTS * meses
    multa_fgts = saldo_fgts * MULTA_FGTS
    dias_aviso = min(DIAS_AVISO_BASE + DIAS_AVISO_POR_ANO * anos, DIAS_AVISO_MAXIMO)
    aviso_previo = salario / 30 * dias_aviso

    total = ferias + decimo_terceiro + saldo_fgts + multa_fgts + aviso_previo

    return {
        'tempo_servico_anos': anos,
        'tempo_servico_meses': meses,
        'ferias_proporcionais': arredondar(ferias),
        'decimo_terceiro_proporcional': arredondar(decimo_terceiro),
        'saldo_fgts': arredondar(saldo_fgts),
        'multa_fgts': arredondar(multa_fgts),
        'dias_aviso_previo': dias_aviso,
        'aviso_previo': arredondar(aviso_previo),
        'total': arredondar(total),
    }


def calcular_custo_mensal(funcionario) -> Decimal:
    """
    Custo mensal do funcionário para o condomínio

    Salário + INSS patronal (20%) + FGTS + provisão de 13º e férias + benefícios.
    """
    salario = _decimal(funcionario.salario_base)

    encargos = salario * (ALIQUOTA_INSS_PATRONAL + ALIQUOTA_FGTS)
    provisoes = salario / 12 + (salario / 12) * FATOR_FERIAS
    beneficios = sum(
        (_decimal(getattr(funcionario, campo, None)) for campo in (
            'vale_transporte', 'vale_refeicao', 'vale_alimentacao', 'plano_saude',
        )),
        ZERO,
    )

    return arredondar(salario + encargos + provisoes + beneficios)


def calcular_folha(funcionario, hoje: Optional[date] = None) -> Dict:
    """Resumo de folha de um funcionário (usado pela API e pelos relatórios)"""
    salario = _decimal(funcionario.salario_base)
    inss = calcular_inss(salario)
    fgts = calcular_fgts(salario)
    irrf = calcular_irrf(salario, inss['valor'])

    return {
        'salario_base': arredondar(salario),
        'inss': inss,
        'fgts': fgts,
        'irrf': irrf,
        'salario_liquido': arredondar(salario - inss['valor'] - irrf['valor']),
        'custo_mensal': calcular_custo_mensal(funcionario),
        'passivo': calcular_passivo_trabalhista(salario, funcionario.data_admissao, hoje),
    }
