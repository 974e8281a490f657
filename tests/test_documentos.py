# tests/test_documentos.py

from datetime import date, timedelta

import pytest
from django.utils import timezone

from apps.documentos.models import Documento, Fornecedor


@pytest.fixture
def documentos(condominio):
    hoje = timezone.localdate()
    return {
        'vencido': Documento.objects.create(
            condominio=condominio, nome='Alvará', tipo='alvara', data_validade=hoje - timedelta(days=3)
        ),
        'vencendo': Documento.objects.create(
            condominio=condominio, nome='AVCB', tipo='avcb', data_validade=hoje + timedelta(days=30)
        ),
        'em_dia': Documento.objects.create(
            condominio=condominio, nome='Contrato', tipo='contrato', data_validade=hoje + timedelta(days=31)
        ),
        'sem_validade': Documento.objects.create(condominio=condominio, nome='Regimento'),
    }


@pytest.mark.django_db
class TestDocumentos:

    def test_vencendo_inclui_vencidos_e_janela(self, documentos):
        nomes = set(Documento.objects.vencendo().values_list('nome', flat=True))

        assert nomes == {'Alvará', 'AVCB'}

    def test_vencendo_com_janela_e_data(self, documentos):
        referencia = timezone.localdate() + timedelta(days=1)

        nomes = set(Documento.objects.vencendo(dias=0, hoje=referencia).values_list('nome', flat=True))

        assert nomes == {'Alvará'}

    def test_dias_para_vencer(self):
        documento = Documento(nome='X', data_validade=date(2024, 3, 10))

        assert documento.dias_para_vencer(hoje=date(2024, 3, 1)) == 9
        assert Documento(nome='Y').dias_para_vencer() is None

    def test_api_filtra_vencendo(self, cliente_morador, documentos):
        response = cliente_morador.get('/api/documentos/?vencendo=1')

        dados = response.json()['data']
        assert [d['nome'] for d in dados] == ['Alvará', 'AVCB']
        assert dados[0]['vencido'] is True
        assert dados[1]['dias_para_vencer'] == 30

    def test_morador_nao_envia_documento(self, cliente_morador):
        response = cliente_morador.post_json('/api/documentos/', {'nome': 'Ata', 'tipo': 'outros'})

        assert response.status_code == 403

    def test_sindico_envia_documento(self, cliente_sindico, sindico):
        response = cliente_sindico.post_json('/api/documentos/', {
            'nome': 'Ata', 'tipo': 'outros', 'data_validade': '2030-01-01',
        })

        assert response.status_code == 201
        assert response.json()['data']['enviado_por'] == sindico.pk


@pytest.mark.django_db
class TestFornecedores:

    def test_whatsapp_guarda_apenas_digitos(self, cliente_sindico):
        response = cliente_sindico.post_json('/api/fornecedores/', {
            'nome': 'Elevadores Sul', 'categoria': 'Elevadores', 'whatsapp': '(48) 99999-0000',
        })

        assert response.status_code == 201
        assert response.json()['data']['whatsapp'] == '48999990000'

    def test_busca_por_nome_ou_categoria(self, cliente_morador, condominio):
        Fornecedor.objects.create(condominio=condominio, nome='Elevadores Sul', categoria='Elevadores')
        Fornecedor.objects.create(condominio=condominio, nome='Limpa Tudo', categoria='Limpeza')

        assert cliente_morador.get('/api/fornecedores/?busca=elevad').json()['count'] == 1
        assert cliente_morador.get('/api/fornecedores/?busca=limpeza').json()['count'] == 1
        assert cliente_morador.get('/api/fornecedores/').json()['count'] == 2
