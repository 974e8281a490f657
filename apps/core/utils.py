# apps/core/utils.py

"""
Utilitários compartilhados pela API JSON

Leitura de corpo JSON, serialização de models e respostas padronizadas
no formato {'success': ..., 'error': ...}.
"""

import json
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from django.db.models.fields.files import FieldFile
from django.forms.models import model_to_dict
from django.http import JsonResponse


class CorpoInvalido(ValueError):
    """Corpo da requisição não é um objeto JSON"""


def ler_json(request) -> Dict:
    """
    Lê o corpo JSON da requisição

    Corpo vazio vale como {}. Qualquer coisa que não seja um objeto
    JSON levanta CorpoInvalido.
    """
    if not request.body:
        return {}
    try:
        dados = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CorpoInvalido("JSON inválido") from e
    if not isinstance(dados, dict):
        raise CorpoInvalido("JSON inválido")
    return dados


def _valor_serializavel(valor):
    if isinstance(valor, Decimal):
        return float(valor)
    if isinstance(valor, FieldFile):
        return valor.url if valor else None
    return valor


def serializar(obj, campos: Optional[Iterable[str]] = None, excluir: Iterable[str] = ()) -> Dict:
    """
    Converte uma instância de model em dict serializável

    Chaves estrangeiras saem como o id (nome do campo sem sufixo _id).
    Datas ficam a cargo do DjangoJSONEncoder usado pelo JsonResponse.
    """
    dados = {}
    for field in obj._meta.concrete_fields:
        if campos is not None and field.name not in campos:
            continue
        if field.name in excluir:
            continue
        if field.is_relation:
            dados[field.name] = getattr(obj, field.attname)
        else:
            dados[field.name] = _valor_serializavel(getattr(obj, field.name))
    return dados


def serializar_lista(objetos, **kwargs) -> List[Dict]:
    return [serializar(obj, **kwargs) for obj in objetos]


def converter_decimais(valor):
    """Troca Decimal por float em dicts/listas aninhados (respostas de cálculo)"""
    if isinstance(valor, dict):
        return {k: converter_decimais(v) for k, v in valor.items()}
    if isinstance(valor, (list, tuple)):
        return [converter_decimais(v) for v in valor]
    if isinstance(valor, Decimal):
        return float(valor)
    return valor


def dados_para_formulario(instancia, corpo: Dict, campos: Iterable[str]) -> Dict:
    """
    Mescla o estado atual da instância com o corpo recebido

    Permite PATCH parcial e faz com que campos omitidos num POST
    assumam o default do model (instância nova ainda não salva).
    """
    dados = model_to_dict(instancia, fields=list(campos))
    dados.update({k: v for k, v in corpo.items() if k in campos})
    return dados


def erros_formulario(form) -> Dict[str, List[str]]:
    return {
        campo: [erro['message'] for erro in erros]
        for campo, erros in form.errors.get_json_data().items()
    }


def resposta_erro(mensagem: str, status: int = 400, **extra) -> JsonResponse:
    return JsonResponse({'success': False, 'error': mensagem, **extra}, status=status)


def resposta_formulario_invalido(form) -> JsonResponse:
    return resposta_erro('Dados inválidos', 400, detalhes=erros_formulario(form))


def resposta_ok(dados=None, status: int = 200, **extra) -> JsonResponse:
    corpo = {'success': True}
    if dados is not None:
        corpo['data'] = dados
    corpo.update(extra)
    return JsonResponse(corpo, status=status)
