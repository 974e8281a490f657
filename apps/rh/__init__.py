"""
App RH - cadastro de funcionários do condomínio e cálculos de folha
(INSS, FGTS, IRRF, passivo trabalhista e custo mensal).
"""
