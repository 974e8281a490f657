# apps/rh/admin.py

from django.contrib import admin

from .models import Funcionario


@admin.register(Funcionario)
class FuncionarioAdmin(admin.ModelAdmin):
    list_display = ['matricula', 'nome', 'funcao', 'departamento', 'salario_base', 'status', 'condominio']
    list_filter = ['status', 'tipo_contrato', 'departamento', 'condominio']
    search_fields = ['nome', 'cpf', 'matricula']
    readonly_fields = ['matricula', 'criado_em', 'atualizado_em']

    fieldsets = (
        ('Dados Pessoais', {
            'fields': ('condominio', 'nome', 'cpf', 'rg', 'data_nascimento', 'telefone', 'email')
        }),
        ('Endereço', {
            'fields': ('endereco', 'cidade', 'estado', 'cep'),
            'classes': ('collapse',)
        }),
        ('Contrato', {
            'fields': (
                'matricula', 'funcao', 'departamento', 'tipo_contrato', 'carga_horaria_semanal',
                'data_admissao', 'data_demissao', 'salario_base', 'status',
            )
        }),
        ('Benefícios', {
            'fields': ('vale_transporte', 'vale_refeicao', 'vale_alimentacao', 'plano_saude')
        }),
        ('Outros', {
            'fields': ('observacoes', 'criado_em', 'atualizado_em'),
        }),
    )
