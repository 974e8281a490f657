"""
App Mercado - mini mercado autônomo do condomínio: catálogo, promoções,
vendas com baixa de estoque e cashback por unidade.
"""
