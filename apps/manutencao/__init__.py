# apps/manutencao/__init__.py

"""
Manutenção - equipamentos do condomínio e chamados de manutenção
"""
