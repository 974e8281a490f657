# apps/__init__.py

"""
Condo Gestão - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: condomínios, usuários, autenticação e permissões
- manutencao: equipamentos e chamados de manutenção
- monitoramento: leituras de piscina, água, gás, energia, ocupação e resíduos
- documentos: documentos legais e fornecedores
- comunicacao: comunicados, notificações e WebSockets
- rh: funcionários e cálculos de folha
- mercado: mini mercado (PDV, estoque e cashback)
- equipe: equipe operacional, processos e listas de atividades
- relatorios: dashboard e exportações PDF, CSV e Excel
"""

__version__ = '0.1.0'
__author__ = 'Equipe Condo Gestão'
