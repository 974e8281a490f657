# apps/core/api.py

"""
Views genéricas de CRUD da API, sempre escopadas pelo condomínio ativo

Cada recurso declara model, formulário, módulo e filtros; a mesma classe
atende a coleção (`/recurso/`) e o item (`/recurso/<pk>/`).
"""

import logging

from django.http import HttpResponseNotAllowed
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from .permissions import CondominioAccessMixin
from .utils import (
    CorpoInvalido, dados_para_formulario, ler_json, resposta_erro,
    resposta_formulario_invalido, resposta_ok, serializar,
)

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name='dispatch')
class RecursoCondominioView(CondominioAccessMixin, View):
    """
    CRUD JSON de um model que herda de ModeloCondominio

    Atributos:
        model / form_class: model e ModelForm (com `fields` explícito)
        ordering: ordenação da listagem
        filtros: {parametro_get: lookup_orm}
        campo_autor: campo FK preenchido com o usuário na criação
        nao_encontrado: mensagem de 404
    """

    model = None
    form_class = None
    ordering = ('-criado_em', '-id')
    filtros = {}
    campo_autor = None
    nao_encontrado = 'Registro não encontrado'

    http_method_names = ['get', 'post', 'put', 'patch', 'delete']

    # === CONSULTAS ===

    def get_base_queryset(self):
        return self.model.objects.filter(condominio=self.request.condominio)

    def get_queryset(self):
        queryset = self.get_base_queryset()
        for parametro, lookup in self.filtros.items():
            valor = self.request.GET.get(parametro)
            if valor not in (None, ''):
                queryset = queryset.filter(**{lookup: valor})
        return queryset.order_by(*self.ordering)

    def get_object(self, pk):
        return self.get_base_queryset().filter(pk=pk).first()

    def serializar(self, obj):
        return serializar(obj)

    # === GANCHOS ===

    def antes_de_salvar(self, obj, criando):
        pass

    def depois_de_salvar(self, obj, criando):
        pass

    def antes_de_excluir(self, obj):
        pass

    # === HANDLERS HTTP ===

    def get(self, request, pk=None):
        if pk is None:
            objetos = list(self.get_queryset())
            return resposta_ok([self.serializar(obj) for obj in objetos], count=len(objetos))

        obj = self.get_object(pk)
        if obj is None:
            return resposta_erro(self.nao_encontrado, 404)
        return resposta_ok(self.serializar(obj))

    def post(self, request, pk=None):
        if pk is not None:
            return HttpResponseNotAllowed(['GET', 'PUT', 'PATCH', 'DELETE'])

        instancia = self.model(condominio=request.condominio)
        return self._salvar(instancia, status=201)

    def patch(self, request, pk=None):
        if pk is None:
            return HttpResponseNotAllowed(['GET', 'POST'])

        obj = self.get_object(pk)
        if obj is None:
            return resposta_erro(self.nao_encontrado, 404)
        return self._salvar(obj, status=200)

    put = patch

    def delete(self, request, pk=None):
        if pk is None:
            return HttpResponseNotAllowed(['GET', 'POST'])

        obj = self.get_object(pk)
        if obj is None:
            return resposta_erro(self.nao_encontrado, 404)

        self.antes_de_excluir(obj)
        obj.delete()
        logger.info(f"🗑️ {self.model.__name__} {pk} excluído por {request.user.email}")
        return resposta_ok()

    # === AUXILIARES ===

    def get_form(self, instancia, corpo):
        campos = self.form_class._meta.fields
        dados = dados_para_formulario(instancia, corpo, campos)
        return self.form_class(data=dados, instance=instancia, condominio=self.request.condominio)

    def _salvar(self, instancia, status):
        try:
            corpo = ler_json(self.request)
        except CorpoInvalido as e:
            return resposta_erro(str(e), 400)

        form = self.get_form(instancia, corpo)
        if not form.is_valid():
            return resposta_formulario_invalido(form)

        criando = instancia.pk is None
        obj = form.save(commit=False)
        obj.condominio = self.request.condominio
        if criando and self.campo_autor:
            setattr(obj, self.campo_autor, self.request.user)

        self.antes_de_salvar(obj, criando)
        obj.save()
        self.depois_de_salvar(obj, criando)

        return resposta_ok(self.serializar(obj), status=status)
