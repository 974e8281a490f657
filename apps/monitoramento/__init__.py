"""
App Monitoramento - leituras de piscina, água, gás e energia,
dados de ocupação e configuração da coleta de resíduos.
"""
