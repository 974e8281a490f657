# apps/equipe/services.py

import logging
from typing import Dict, Iterable
from urllib.parse import quote

from django.db import transaction
from django.utils import timezone

from .models import ItemListaAtividade, ListaAtividades, ModeloAtividade

logger = logging.getLogger(__name__)

WHATSAPP_URL = 'https://wa.me/{numero}?text={texto}'
DDI_BRASIL = '55'


def titulo_padrao(membro, data_execucao) -> str:
    return f"Atividades - {membro.nome} - {data_execucao:%d/%m/%Y}"


def criar_lista(lista: ListaAtividades, modelos_ids: Iterable[int]) -> ListaAtividades:
    """
    Salva a lista e copia cada modelo de atividade para um item, na ordem
    em que os ids foram informados

    Ids de outro condomínio ou inexistentes são ignorados.
    """
    modelos_ids = [int(i) for i in modelos_ids]
    modelos = ModeloAtividade.objects.in_bulk(modelos_ids)

    if not lista.titulo:
        lista.titulo = titulo_padrao(lista.membro, lista.data_execucao)

    with transaction.atomic():
        lista.save()

        itens = []
        for modelo_id in modelos_ids:
            modelo = modelos.get(modelo_id)
            if modelo is None or modelo.condominio_id != lista.condominio_id:
                continue
            itens.append(ItemListaAtividade(
                lista=lista,
                modelo=modelo,
                titulo=modelo.titulo,
                descricao=modelo.descricao,
                area=modelo.area,
                instrucoes=modelo.instrucoes,
                tempo_estimado=modelo.tempo_estimado,
                ordem=len(itens),
            ))
        ItemListaAtividade.objects.bulk_create(itens)

    logger.info(f"📋 Lista '{lista.titulo}' criada com {len(itens)} atividades")
    return lista


def recalcular_status(lista: ListaAtividades) -> str:
    """Nenhum item concluído: pendente; alguns: em andamento; todos: concluída"""
    total = lista.itens.count()
    concluidos = lista.itens.filter(concluido=True).count()

    if total and concluidos == total:
        status = 'concluida'
    elif concluidos:
        status = 'em_andamento'
    else:
        status = 'pendente'

    if lista.status != status:
        lista.status = status
        lista.save(update_fields=['status'])
    return status


def marcar_item(item: ItemListaAtividade, concluido: bool) -> ItemListaAtividade:
    item.concluido = concluido
    item.data_conclusao = timezone.now() if concluido else None
    item.save(update_fields=['concluido', 'data_conclusao'])
    recalcular_status(item.lista)
    return item


# === WHATSAPP ===

def numero_whatsapp(numero: str) -> str:
    """Apenas dígitos, com DDI 55 quando ausente"""
    digitos = ''.join(c for c in numero or '' if c.isdigit())
    if digitos and not digitos.startswith(DDI_BRASIL):
        digitos = DDI_BRASIL + digitos
    return digitos


def montar_mensagem(lista: ListaAtividades) -> str:
    linhas = [
        f"📋 *{lista.titulo}*",
        "",
        f"👤 {lista.membro.nome}",
        f"📅 {lista.data_execucao:%d/%m/%Y} - {lista.get_turno_display()}",
        f"⚡ Prioridade: {lista.get_prioridade_display()}",
        "",
        "*Atividades:*",
    ]

    for numero, item in enumerate(lista.itens.all(), start=1):
        marcador = '✅' if item.concluido else '⬜'
        tempo = f" ({item.tempo_estimado} min)" if item.tempo_estimado else ''
        linhas.append(f"{marcador} {numero}. {item.titulo}{tempo}")
        if item.area:
            linhas.append(f"   📍 {item.area}")
        if item.instrucoes:
            linhas.append(f"   ℹ️ {item.instrucoes}")

    if lista.observacoes:
        linhas += ["", f"📝 Obs: {lista.observacoes}"]

    return "\n".join(linhas)


def url_whatsapp(numero: str, mensagem: str) -> str:
    return WHATSAPP_URL.format(numero=numero_whatsapp(numero), texto=quote(mensagem, safe=''))


def enviar_whatsapp(lista: ListaAtividades) -> Dict[str, str]:
    """
    Gera o link wa.me da lista e a marca como enviada

    Raises:
        ValueError: membro sem WhatsApp cadastrado
    """
    if not numero_whatsapp(lista.membro.whatsapp):
        raise ValueError('Membro não possui WhatsApp cadastrado')

    mensagem = montar_mensagem(lista)

    lista.enviado_whatsapp = True
    lista.data_envio_whatsapp = timezone.now()
    lista.save(update_fields=['enviado_whatsapp', 'data_envio_whatsapp'])

    return {'urlWhatsApp': url_whatsapp(lista.membro.whatsapp, mensagem), 'mensagem': mensagem}


def estatisticas(condominio) -> Dict:
    listas = ListaAtividades.objects.filter(condominio=condominio)
    itens = ItemListaAtividade.objects.filter(lista__condominio=condominio)

    total_atividades = itens.count()
    atividades_concluidas = itens.filter(concluido=True).count()

    return {
        'totalListas': listas.count(),
        'pendentes': listas.filter(status='pendente').count(),
        'emAndamento': listas.filter(status='em_andamento').count(),
        'concluidas': listas.filter(status='concluida').count(),
        'totalAtividades': total_atividades,
        'atividadesConcluidas': atividades_concluidas,
        'percentualConclusao': round(atividades_concluidas / total_atividades * 100) if total_atividades else 0,
    }
