# tests/test_rh.py

from decimal import Decimal

import pytest

from apps.rh.models import Funcionario

DADOS_FUNCIONARIO = {
    'nome': 'José da Silva',
    'cpf': '123.456.789-01',
    'estado': 'sc',
    'funcao': 'Zelador',
    'departamento': 'Manutenção',
    'data_admissao': '2023-03-01',
    'salario_base': '2500.00',
}


@pytest.mark.django_db
class TestFuncionarios:

    def test_morador_nao_ve_salarios(self, cliente_morador):
        response = cliente_morador.get('/api/funcionarios/')

        assert response.status_code == 403

    def test_cadastro_gera_matricula(self, cliente_sindico):
        primeiro = cliente_sindico.post_json('/api/funcionarios/', DADOS_FUNCIONARIO)
        segundo = cliente_sindico.post_json('/api/funcionarios/', {**DADOS_FUNCIONARIO, 'nome': 'Maria'})

        assert primeiro.status_code == 201
        dados = primeiro.json()['data']
        assert dados['matricula'] == 'FUNC-0001'
        assert dados['cpf'] == '12345678901'
        assert dados['estado'] == 'SC'
        assert segundo.json()['data']['matricula'] == 'FUNC-0002'

    def test_matricula_nao_reaproveita_numero_ocupado(self, condominio):
        Funcionario.objects.create(
            condominio=condominio, nome='A', funcao='Porteiro', salario_base=Decimal('2000')
        )
        segundo = Funcionario.objects.create(
            condominio=condominio, nome='B', funcao='Porteiro', salario_base=Decimal('2000')
        )
        Funcionario.objects.filter(matricula='FUNC-0001').delete()

        terceiro = Funcionario.objects.create(
            condominio=condominio, nome='C', funcao='Porteiro', salario_base=Decimal('2000')
        )

        assert segundo.matricula == 'FUNC-0002'
        assert terceiro.matricula == 'FUNC-0003'

    def test_cpf_invalido(self, cliente_sindico):
        response = cliente_sindico.post_json('/api/funcionarios/', {**DADOS_FUNCIONARIO, 'cpf': '123'})

        assert response.status_code == 400
        assert response.json()['detalhes']['cpf'] == ['CPF deve ter 11 dígitos.']

    def test_demissao_antes_da_admissao(self, cliente_sindico):
        response = cliente_sindico.post_json('/api/funcionarios/', {
            **DADOS_FUNCIONARIO, 'data_demissao': '2022-01-01',
        })

        assert response.status_code == 400

    def test_busca(self, cliente_sindico):
        cliente_sindico.post_json('/api/funcionarios/', DADOS_FUNCIONARIO)

        assert cliente_sindico.get('/api/funcionarios/?busca=josé').json()['count'] == 1
        assert cliente_sindico.get('/api/funcionarios/?busca=FUNC-0001').json()['count'] == 1
        assert cliente_sindico.get('/api/funcionarios/?busca=pedro').json()['count'] == 0


@pytest.mark.django_db
class TestFolha:

    @pytest.fixture
    def funcionario(self, condominio):
        return Funcionario.objects.create(
            condominio=condominio, nome='José', funcao='Zelador', departamento='Manutenção',
            salario_base=Decimal('3000.00'),
        )

    def test_folha_do_funcionario(self, cliente_sindico, funcionario):
        response = cliente_sindico.get(f'/api/funcionarios/{funcionario.pk}/folha/')

        assert response.status_code == 200
        dados = response.json()['data']
        assert dados['funcionario']['matricula'] == funcionario.matricula
        assert dados['inss']['valor'] == 258.82
        assert dados['irrf']['valor'] == 47.19
        assert dados['salario_liquido'] == 2693.99

    def test_folha_de_funcionario_inexistente(self, cliente_sindico):
        assert cliente_sindico.get('/api/funcionarios/999/folha/').status_code == 404

    def test_estatisticas(self, cliente_sindico, condominio, funcionario):
        Funcionario.objects.create(
            condominio=condominio, nome='Ana', funcao='Porteira', salario_base=Decimal('2000.00'),
            status='demitido',
        )

        dados = cliente_sindico.get('/api/rh/estatisticas/').json()['data']

        assert dados['total_funcionarios'] == 2
        assert dados['ativos'] == 1
        assert dados['folha_mensal'] == 3000.0
        assert dados['por_departamento'] == {'Manutenção': 1, 'Sem departamento': 1}
