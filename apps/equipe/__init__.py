"""
App Equipe - membros da equipe operacional, processos recorrentes e
listas de atividades diárias enviadas por WhatsApp.
"""
