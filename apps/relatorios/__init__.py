# apps/relatorios/__init__.py

"""
Relatórios - dashboard e exportações do Condo Gestão

Funcionalidades:
- Dashboard consolidado do condomínio (JSON)
- Relatório de manutenção em PDF (ReportLab)
- Exportação CSV/Excel de chamados, folha e vendas
"""
