# apps/documentos/views.py

from django.db.models import Q

from apps.core.api import RecursoCondominioView
from apps.core.utils import serializar
from .forms import DocumentoForm, FornecedorForm
from .models import Documento, Fornecedor


class DocumentoView(RecursoCondominioView):
    """
    Documentos do condomínio

    `?vencendo=1` restringe aos que vencem dentro da janela de alerta
    (CONDO_DOCUMENTOS_ALERTA_DIAS), incluindo os já vencidos.
    """

    model = Documento
    form_class = DocumentoForm
    modulo = 'documentos'
    escrita_requer = 'gestao'
    campo_autor = 'enviado_por'
    ordering = ('data_validade', 'nome')
    filtros = {'tipo': 'tipo'}
    nao_encontrado = 'Documento não encontrado'

    def get_queryset(self):
        queryset = super().get_queryset()
        if self.request.GET.get('vencendo') in ('1', 'true'):
            queryset = queryset.vencendo()
        return queryset

    def serializar(self, obj):
        dados = serializar(obj)
        dados['vencido'] = obj.vencido
        dados['dias_para_vencer'] = obj.dias_para_vencer()
        return dados


class FornecedorView(RecursoCondominioView):
    model = Fornecedor
    form_class = FornecedorForm
    modulo = 'fornecedores'
    escrita_requer = 'gestao'
    ordering = ('nome',)
    filtros = {'categoria': 'categoria'}
    nao_encontrado = 'Fornecedor não encontrado'

    def get_queryset(self):
        queryset = super().get_queryset()
        busca = self.request.GET.get('busca', '').strip()
        if busca:
            queryset = queryset.filter(Q(nome__icontains=busca) | Q(categoria__icontains=busca))
        return queryset
