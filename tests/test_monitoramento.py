# tests/test_monitoramento.py

from decimal import Decimal

import pytest

from apps.monitoramento.models import (
    RESIDUOS_PADRAO, ConfigResiduos, DadosOcupacao, EventoEnergia, Reservatorio,
)

LEITURA_PISCINA = {
    'ph': '7.4', 'cloro': '1.5', 'alcalinidade': '100',
    'dureza_calcica': '250', 'temperatura': '26.5',
}


@pytest.mark.django_db
class TestLeituras:

    def test_registrar_leitura_de_piscina(self, cliente_morador, morador):
        response = cliente_morador.post_json('/api/piscina/', LEITURA_PISCINA)

        assert response.status_code == 201
        dados = response.json()['data']
        assert dados['ph'] == 7.4
        assert dados['registrado_por'] == morador.pk

    def test_ph_fora_da_faixa(self, cliente_morador):
        response = cliente_morador.post_json('/api/piscina/', {**LEITURA_PISCINA, 'ph': '15'})

        assert response.status_code == 400
        assert 'ph' in response.json()['detalhes']

    def test_mais_recente_primeiro(self, cliente_morador):
        cliente_morador.post_json('/api/gas/', {'nivel': '80', 'percentual_disponivel': '80'})
        cliente_morador.post_json('/api/gas/', {'nivel': '60', 'percentual_disponivel': '60'})

        dados = cliente_morador.get('/api/gas/').json()['data']

        assert [d['nivel'] for d in dados] == [60.0, 80.0]

    def test_leitura_de_agua_traz_reservatorio(self, cliente_morador, condominio):
        reservatorio = Reservatorio.objects.create(
            condominio=condominio, nome='Caixa superior', capacidade_litros=30000
        )
        cliente_morador.post_json('/api/agua/', {
            'reservatorio': reservatorio.pk, 'nivel': '85', 'volume_disponivel': '25500',
        })

        dados = cliente_morador.get(f'/api/agua/?reservatorio={reservatorio.pk}').json()['data']

        assert len(dados) == 1
        assert dados[0]['reservatorio_nome'] == 'Caixa superior'

    def test_modulo_desabilitado(self, cliente_morador, condominio):
        condominio.permissoes_modulos.filter(chave='piscina').update(habilitado=False)

        assert cliente_morador.get('/api/piscina/').status_code == 403


@pytest.mark.django_db
class TestEnergia:

    def test_resolver_evento(self, cliente_sindico, condominio):
        evento = EventoEnergia.objects.create(condominio=condominio, status='falta_energia')

        assert cliente_sindico.get('/api/energia/?resolvido=0').json()['count'] == 1

        response = cliente_sindico.post_json(f'/api/energia/{evento.pk}/resolver/')

        assert response.status_code == 200
        assert response.json()['data']['resolvido_em'] is not None
        assert cliente_sindico.get('/api/energia/?resolvido=0').json()['count'] == 0
        assert cliente_sindico.get('/api/energia/?resolvido=1').json()['count'] == 1

    def test_resolvido_em_nao_muda_pelo_crud(self, cliente_sindico, condominio):
        response = cliente_sindico.post_json('/api/energia/', {
            'status': 'meia_fase', 'resolvido_em': '2024-01-01T10:00:00Z',
        })

        assert response.status_code == 201
        assert response.json()['data']['resolvido_em'] is None


@pytest.mark.django_db
class TestOcupacao:

    def test_sem_dados(self, cliente_morador):
        response = cliente_morador.get('/api/ocupacao/')

        assert response.status_code == 200
        assert response.json() == {'success': True, 'data': None}

    def test_campos_derivados(self, cliente_sindico):
        response = cliente_sindico.put_json('/api/ocupacao/', {
            'total_unidades': 48, 'unidades_ocupadas': 42, 'media_pessoas_por_unidade': '2.75',
        })

        assert response.status_code == 200
        dados = response.json()['data']
        assert dados['unidades_vagas'] == 6
        # 42 * 2,75 = 115,5 -> arredonda para cima
        assert dados['populacao_estimada'] == 116

    def test_derivados_ignoram_valores_enviados(self, cliente_sindico):
        response = cliente_sindico.put_json('/api/ocupacao/', {
            'total_unidades': 10, 'unidades_ocupadas': 4, 'unidades_vagas': 99,
        })

        assert response.json()['data']['unidades_vagas'] == 6

    def test_atualiza_registro_existente(self, cliente_sindico, condominio):
        cliente_sindico.put_json('/api/ocupacao/', {'total_unidades': 40, 'unidades_ocupadas': 30})
        cliente_sindico.put_json('/api/ocupacao/', {'unidades_ocupadas': 35})

        ocupacao = DadosOcupacao.objects.get(condominio=condominio)
        assert ocupacao.total_unidades == 40
        assert ocupacao.unidades_vagas == 5

    def test_ocupadas_maior_que_total(self, cliente_sindico):
        response = cliente_sindico.put_json('/api/ocupacao/', {'total_unidades': 10, 'unidades_ocupadas': 11})

        assert response.status_code == 400

    def test_morador_nao_altera(self, cliente_morador):
        response = cliente_morador.put_json('/api/ocupacao/', {'total_unidades': 10})

        assert response.status_code == 403

    def test_calculo_no_model(self, condominio):
        ocupacao = DadosOcupacao.objects.create(
            condominio=condominio, total_unidades=20, unidades_ocupadas=25,
            media_pessoas_por_unidade=Decimal('2'),
        )

        assert ocupacao.unidades_vagas == 0
        assert ocupacao.populacao_estimada == 50


@pytest.mark.django_db
class TestResiduos:

    def test_configuracao_sugerida(self, cliente_morador):
        dados = cliente_morador.get('/api/residuos/').json()['data']

        assert dados['cronograma'] == RESIDUOS_PADRAO['cronograma']
        assert dados['horario_coleta'] == '07:00'
        assert not ConfigResiduos.objects.exists()

    def test_sindico_atualiza(self, cliente_sindico, condominio, sindico):
        response = cliente_sindico.patch_json('/api/residuos/', {
            'itens_organicos': ['Restos de comida'],
            'horario_coleta': '06:30',
        })

        assert response.status_code == 200
        config = ConfigResiduos.objects.get(condominio=condominio)
        assert config.itens_organicos == ['Restos de comida']
        assert config.nao_reciclaveis == RESIDUOS_PADRAO['nao_reciclaveis']
        assert config.horario_coleta == '06:30'
        assert config.atualizado_por == sindico

    def test_aceita_lista_em_string(self, cliente_sindico, condominio):
        response = cliente_sindico.patch_json('/api/residuos/', {'nao_reciclaveis': '["Isopor"]'})

        assert response.status_code == 200
        assert ConfigResiduos.objects.get(condominio=condominio).nao_reciclaveis == ['Isopor']

    @pytest.mark.parametrize('valor', ['nao e json', {'dia': 'Segunda'}])
    def test_lista_invalida(self, cliente_sindico, valor):
        response = cliente_sindico.patch_json('/api/residuos/', {'cronograma': valor})

        assert response.status_code == 400
        assert response.json()['error'] == 'cronograma deve ser um array JSON válido'

    def test_conselheiro_nao_altera(self, api_client_para, conselheiro):
        response = api_client_para(conselheiro).patch_json('/api/residuos/', {'horario_coleta': '08:00'})

        assert response.status_code == 403
