# tests/test_manutencao.py

import pytest

from apps.comunicacao.models import Notificacao
from apps.manutencao.models import ChamadoManutencao, ConclusaoManutencao, Equipamento
from apps.manutencao.services import atualizar_status_chamado


@pytest.fixture
def equipamento(condominio):
    return Equipamento.objects.create(
        condominio=condominio, nome='Portão da garagem', categoria='portoes', localizacao='Subsolo'
    )


@pytest.fixture
def chamado(equipamento, morador):
    return ChamadoManutencao.objects.create(
        condominio=equipamento.condominio,
        equipamento=equipamento,
        titulo='Portão não fecha',
        descricao='Fica aberto depois que o carro passa',
        solicitado_por=morador,
    )


@pytest.mark.django_db
class TestEquipamentos:

    def test_criar_e_filtrar(self, cliente_sindico, equipamento):
        response = cliente_sindico.post_json('/api/equipamentos/', {
            'nome': 'Bomba 2', 'categoria': 'bombas', 'localizacao': 'Casa de máquinas',
            'status': 'alerta',
        })
        assert response.status_code == 201
        assert response.json()['data']['fotos'] == []

        response = cliente_sindico.get('/api/equipamentos/?status=alerta')
        assert [e['nome'] for e in response.json()['data']] == ['Bomba 2']

    def test_categoria_invalida(self, cliente_sindico):
        response = cliente_sindico.post_json('/api/equipamentos/', {
            'nome': 'Foguete', 'categoria': 'espacial', 'localizacao': 'Telhado',
        })

        assert response.status_code == 400
        assert 'categoria' in response.json()['detalhes']

    def test_patch_parcial_mantem_demais_campos(self, cliente_sindico, equipamento):
        response = cliente_sindico.patch_json(f'/api/equipamentos/{equipamento.pk}/', {'status': 'inativo'})

        assert response.status_code == 200
        equipamento.refresh_from_db()
        assert equipamento.status == 'inativo'
        assert equipamento.nome == 'Portão da garagem'

    def test_excluir(self, cliente_sindico, equipamento):
        assert cliente_sindico.delete(f'/api/equipamentos/{equipamento.pk}/').status_code == 200
        assert not Equipamento.objects.filter(pk=equipamento.pk).exists()


@pytest.mark.django_db
class TestChamados:

    def test_morador_abre_chamado(self, cliente_morador, equipamento, morador):
        response = cliente_morador.post_json('/api/manutencoes/', {
            'equipamento': equipamento.pk,
            'titulo': 'Lâmpada queimada',
            'descricao': 'Garagem escura',
            'status': 'concluido',
        })

        assert response.status_code == 201
        dados = response.json()['data']
        assert dados['status'] == 'aberto'
        assert dados['solicitado_por'] == morador.pk
        assert dados['equipamento_nome'] == 'Portão da garagem'

    def test_mudanca_de_status_notifica_solicitante(self, cliente_sindico, chamado, morador):
        response = cliente_sindico.patch_json(f'/api/manutencoes/{chamado.pk}/', {'status': 'em_andamento'})

        assert response.status_code == 200
        assert response.json()['data']['status'] == 'em_andamento'

        notificacao = Notificacao.objects.get(usuario=morador)
        assert notificacao.tipo == 'maintenance_update'
        assert notificacao.titulo == 'Chamado Atualizado: Em Andamento'
        assert notificacao.relacionado_id == str(chamado.pk)

    def test_mesmo_status_nao_notifica(self, chamado):
        assert atualizar_status_chamado(chamado, 'aberto') is False
        assert not Notificacao.objects.exists()

    def test_status_invalido(self, cliente_sindico, chamado):
        response = cliente_sindico.patch_json(f'/api/manutencoes/{chamado.pk}/', {'status': 'arquivado'})

        assert response.status_code == 400

    def test_concluido_marca_data(self, chamado):
        atualizar_status_chamado(chamado, 'concluido')
        chamado.refresh_from_db()
        assert chamado.concluido_em is not None

        atualizar_status_chamado(chamado, 'em_andamento')
        chamado.refresh_from_db()
        assert chamado.concluido_em is None

    def test_filtro_por_status(self, cliente_morador, chamado):
        assert cliente_morador.get('/api/manutencoes/?status=aberto').json()['count'] == 1
        assert cliente_morador.get('/api/manutencoes/?status=concluido').json()['count'] == 0


@pytest.mark.django_db
class TestConclusao:

    def test_concluir_chamado(self, cliente_sindico, chamado, sindico, morador):
        response = cliente_sindico.post_json(f'/api/manutencoes/{chamado.pk}/concluir/', {
            'descricao': 'Motor do portão trocado',
        })

        assert response.status_code == 201
        conclusao = ConclusaoManutencao.objects.get(chamado=chamado)
        assert conclusao.executado_por == sindico
        assert conclusao.nome_executor == sindico.get_nome_exibicao()
        assert conclusao.localizacao == 'Subsolo'

        chamado.refresh_from_db()
        assert chamado.status == 'concluido'
        assert Notificacao.objects.filter(usuario=morador, tipo='maintenance_update').count() == 1

    def test_descricao_obrigatoria(self, cliente_sindico, chamado):
        response = cliente_sindico.post_json(f'/api/manutencoes/{chamado.pk}/concluir/', {})

        assert response.status_code == 400
        assert not ConclusaoManutencao.objects.exists()

    def test_consultar_conclusao(self, cliente_morador, cliente_sindico, chamado):
        assert cliente_morador.get(f'/api/manutencoes/{chamado.pk}/conclusao/').status_code == 404

        cliente_sindico.post_json(f'/api/manutencoes/{chamado.pk}/concluir/', {'descricao': 'Feito'})

        response = cliente_morador.get(f'/api/manutencoes/{chamado.pk}/conclusao/')
        assert response.status_code == 200
        assert response.json()['data']['descricao'] == 'Feito'
