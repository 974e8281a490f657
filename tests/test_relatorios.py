# tests/test_relatorios.py

from decimal import Decimal

import pytest

from apps.comunicacao.models import Comunicado
from apps.manutencao.models import ChamadoManutencao, Equipamento
from apps.mercado.models import Produto
from apps.mercado.services import registrar_venda
from apps.monitoramento.models import EventoEnergia, LeituraPiscina
from apps.relatorios.utils import gerar_dados_dashboard, nome_arquivo, resumo_manutencao
from apps.rh.models import Funcionario


@pytest.fixture
def dados_condominio(condominio, sindico, morador):
    equipamento = Equipamento.objects.create(
        condominio=condominio, nome='Bomba', categoria='bombas', localizacao='Subsolo', status='alerta'
    )
    ChamadoManutencao.objects.create(
        condominio=condominio, equipamento=equipamento, titulo='Vazamento',
        descricao='Pingando', solicitado_por=morador,
    )
    ChamadoManutencao.objects.create(
        condominio=condominio, equipamento=equipamento, titulo='Ruído',
        descricao='Barulho', status='concluido',
    )
    LeituraPiscina.objects.create(
        condominio=condominio, ph=Decimal('7.2'), cloro=Decimal('1'), alcalinidade=Decimal('90'),
        dureza_calcica=Decimal('200'), temperatura=Decimal('25'),
    )
    EventoEnergia.objects.create(condominio=condominio, status='meia_fase')
    Comunicado.objects.create(condominio=condominio, titulo='Aviso', conteudo='Texto', criado_por=sindico)
    Funcionario.objects.create(
        condominio=condominio, nome='José', funcao='Zelador', salario_base=Decimal('2500')
    )
    produto = Produto.objects.create(
        condominio=condominio, nome='Café', preco_venda=Decimal('19.90'), estoque_atual=5
    )
    registrar_venda(condominio, sindico, {'itens': [{'produto': produto.pk, 'quantidade': 1}], 'unidade': '302'})
    return condominio


@pytest.mark.django_db
class TestDashboard:

    def test_dados_consolidados(self, dados_condominio):
        dados = gerar_dados_dashboard(dados_condominio)

        assert dados['openRequests'] == 1
        assert dados['totalEquipment'] == 1
        assert dados['latestPoolReading']['ph'] == 7.2
        assert dados['latestWaterReading'] is None
        assert dados['currentEnergyStatus'] == 'meia_fase'
        assert dados['occupancy'] is None
        assert [c['titulo'] for c in dados['recentAnnouncements']] == ['Aviso']

    def test_condominio_vazio(self, condominio):
        dados = gerar_dados_dashboard(condominio)

        assert dados['openRequests'] == 0
        assert dados['currentEnergyStatus'] == 'ok'
        assert dados['recentAnnouncements'] == []

    def test_endpoint(self, cliente_morador, dados_condominio):
        response = cliente_morador.get('/api/dashboard/')

        assert response.status_code == 200
        assert response.json()['data']['openRequests'] == 1

    def test_resumo_manutencao(self, dados_condominio):
        resumo = resumo_manutencao(dados_condominio)

        assert resumo['total_chamados'] == 2
        assert resumo['chamados_abertos'] == 1
        assert resumo['equipamentos_em_alerta'] == 1
        assert resumo['chamados_por_status'] == {'Aberto': 1, 'Em andamento': 0, 'Concluído': 1}


def test_nome_arquivo():
    class Fake:
        nome = 'Residencial São José'

    assert nome_arquivo('chamados', Fake(), 'csv').startswith('chamados_residencial_sao_jose_')


@pytest.mark.django_db
class TestExportacoes:

    @pytest.mark.parametrize('url, content_type', [
        ('/relatorios/manutencao.pdf', 'application/pdf'),
        ('/relatorios/manutencao.csv', 'text/csv; charset=utf-8'),
        ('/relatorios/manutencao.xlsx', 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'),
        ('/relatorios/folha.pdf', 'application/pdf'),
        ('/relatorios/folha.xlsx', 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'),
        ('/relatorios/vendas.csv', 'text/csv; charset=utf-8'),
    ])
    def test_formatos(self, cliente_sindico, dados_condominio, url, content_type):
        response = cliente_sindico.get(url)

        assert response.status_code == 200
        assert response['Content-Type'] == content_type
        assert response['Content-Disposition'].startswith('attachment; filename=')
        assert len(response.content) > 0

    def test_pdf_valido(self, cliente_sindico, dados_condominio):
        response = cliente_sindico.get('/relatorios/manutencao.pdf')

        assert response.content.startswith(b'%PDF')

    def test_csv_de_chamados(self, cliente_sindico, dados_condominio):
        conteudo = cliente_sindico.get('/relatorios/manutencao.csv').content.decode('utf-8')

        assert conteudo.startswith('\ufeffID,Título,Equipamento')
        assert 'Vazamento' in conteudo
        assert 'Morador' in conteudo

    def test_csv_de_vendas(self, cliente_sindico, dados_condominio):
        conteudo = cliente_sindico.get('/relatorios/vendas.csv').content.decode('utf-8')

        assert '1x Café' in conteudo
        assert '19.90' in conteudo

    def test_morador_nao_exporta(self, cliente_morador, dados_condominio):
        assert cliente_morador.get('/relatorios/manutencao.pdf').status_code == 403

    def test_modulo_desabilitado(self, cliente_sindico, dados_condominio):
        dados_condominio.permissoes_modulos.filter(chave='rh').update(habilitado=False)

        assert cliente_sindico.get('/relatorios/folha.pdf').status_code == 403
