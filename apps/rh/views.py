# apps/rh/views.py

import logging
from collections import Counter
from decimal import Decimal

from django.db.models import Q
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.core.api import RecursoCondominioView
from apps.core.permissions import (
    api_login_required, requer_condominio, requer_gestao, requer_modulo,
)
from apps.core.utils import converter_decimais, resposta_erro, resposta_ok
from .calculos import calcular_custo_mensal, calcular_folha, calcular_passivo_trabalhista
from .forms import FuncionarioForm
from .models import Funcionario

logger = logging.getLogger(__name__)


class FuncionarioView(RecursoCondominioView):
    """
    Cadastro de funcionários

    Leitura e escrita restritas à gestão (dados salariais).
    """

    model = Funcionario
    form_class = FuncionarioForm
    modulo = 'rh'
    leitura_requer = 'gestao'
    escrita_requer = 'gestao'
    ordering = ('nome',)
    filtros = {'status': 'status', 'funcao': 'funcao', 'departamento': 'departamento'}
    nao_encontrado = 'Funcionário não encontrado'

    def get_queryset(self):
        queryset = super().get_queryset()
        busca = self.request.GET.get('busca', '').strip()
        if busca:
            queryset = queryset.filter(
                Q(nome__icontains=busca) |
                Q(cpf__icontains=busca) |
                Q(matricula__icontains=busca)
            )
        return queryset

    def depois_de_salvar(self, obj, criando):
        if criando:
            logger.info(f"👷 Funcionário {obj.matricula} cadastrado em {obj.condominio.nome}")


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('rh')
@requer_gestao
def folha_funcionario_view(request, funcionario_id):
    funcionario = Funcionario.objects.filter(
        pk=funcionario_id, condominio=request.condominio
    ).first()
    if funcionario is None:
        return resposta_erro('Funcionário não encontrado', 404)

    folha = calcular_folha(funcionario)
    folha['funcionario'] = {
        'id': funcionario.pk,
        'nome': funcionario.nome,
        'matricula': funcionario.matricula,
    }
    return resposta_ok(converter_decimais(folha))


@csrf_exempt
@require_http_methods(['GET'])
@api_login_required
@requer_condominio
@requer_modulo('rh')
@requer_gestao
def estatisticas_view(request):
    """
    Totais do RH: headcount, folha e custo dos ativos, passivo e departamentos
    """
    funcionarios = list(Funcionario.objects.filter(condominio=request.condominio))
    ativos = [f for f in funcionarios if f.status == 'ativo']

    folha_mensal = sum((f.salario_base for f in ativos), Decimal('0'))
    custo_total = sum((calcular_custo_mensal(f) for f in ativos), Decimal('0'))
    passivo_total = sum(
        (calcular_passivo_trabalhista(f.salario_base, f.data_admissao)['total'] for f in ativos),
        Decimal('0'),
    )
    por_departamento = Counter(f.departamento or 'Sem departamento' for f in funcionarios)

    return resposta_ok(converter_decimais({
        'total_funcionarios': len(funcionarios),
        'ativos': len(ativos),
        'folha_mensal': folha_mensal,
        'custo_total': custo_total,
        'passivo_total': passivo_total,
        'por_departamento': dict(por_departamento),
    }))
