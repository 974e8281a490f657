# apps/core/management/commands/seed.py

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.comunicacao.models import Comunicado
from apps.core.models import Condominio, Usuario, VinculoCondominio
from apps.documentos.models import Documento, Fornecedor
from apps.equipe.models import MembroEquipe, ModeloAtividade
from apps.manutencao.models import ChamadoManutencao, Equipamento
from apps.mercado.models import Categoria, Produto
from apps.monitoramento.models import (
    DadosOcupacao, EventoEnergia, LeituraAgua, LeituraGas, LeituraPiscina, Reservatorio,
)
from apps.rh.models import Funcionario

SENHA_DEMO = 'condo123'


class Command(BaseCommand):
    help = 'Cria um condomínio de demonstração com usuários, equipamentos, leituras e produtos'

    def add_arguments(self, parser):
        parser.add_argument(
            '--nome',
            default='Residencial Demo',
            help='Nome do condomínio de demonstração'
        )

    def handle(self, *args, **options):
        nome = options['nome']

        if Condominio.objects.filter(nome=nome).exists():
            self.stdout.write(self.style.WARNING(f'⚠️  Condomínio "{nome}" já existe, nada a fazer.'))
            return

        self.stdout.write('🌱 Populando banco com dados demo...')

        with transaction.atomic():
            condominio = Condominio.objects.create(
                nome=nome,
                endereco='Rua das Palmeiras, 100',
                cidade='Florianópolis',
                estado='SC',
                cep='88000-000',
                total_unidades=48,
            )
            usuarios = self._criar_usuarios(condominio)
            self._criar_manutencao(condominio, usuarios['morador'])
            self._criar_leituras(condominio, usuarios['sindico'])
            self._criar_documentos(condominio, usuarios['sindico'])
            self._criar_equipe(condominio)
            self._criar_mercado(condominio)

            Comunicado.objects.create(
                condominio=condominio,
                titulo='Bem-vindos ao Condo Gestão',
                conteudo='A partir de hoje os chamados de manutenção são abertos pelo sistema.',
                criado_por=usuarios['sindico'],
            )

        self.stdout.write(
            self.style.SUCCESS(
                '\n✅ Dados demo criados!\n'
                '\n'
                f'  🏢 Condomínio: {condominio.nome}\n'
                f'  🔑 admin@condo.local / {SENHA_DEMO}\n'
                f'  🔑 sindico@condo.local / {SENHA_DEMO}\n'
                f'  🔑 morador@condo.local / {SENHA_DEMO}\n'
            )
        )

    def _criar_usuarios(self, condominio):
        self.stdout.write('  👤 Criando usuários...')

        dados = [
            ('admin', 'Administrador', 'admin', '', None),
            ('sindico', 'Carlos Síndico', 'sindico', '101', 'sindico'),
            ('morador', 'Ana Moradora', 'condomino', '302', 'condomino'),
        ]

        usuarios = {}
        for chave, nome, papel, unidade, papel_vinculo in dados:
            email = f'{chave}@condo.local'
            usuario = Usuario.objects.filter(email=email).first()
            if usuario is None:
                usuario = Usuario.objects.create_user(
                    username=chave,
                    email=email,
                    password=SENHA_DEMO,
                    nome=nome,
                    papel=papel,
                    unidade=unidade,
                    is_staff=papel == 'admin',
                    is_superuser=papel == 'admin',
                )
            if papel_vinculo:
                VinculoCondominio.objects.get_or_create(
                    usuario=usuario,
                    condominio=condominio,
                    defaults={'papel': papel_vinculo, 'unidade': unidade},
                )
            usuarios[chave] = usuario

        return usuarios

    def _criar_manutencao(self, condominio, morador):
        self.stdout.write('  🔧 Criando equipamentos e chamados...')

        equipamentos = [
            ('Bomba de recalque 1', 'bombas', 'Casa de máquinas', 'operacional'),
            ('Elevador social A', 'elevadores', 'Torre A', 'atencao'),
            ('Piscina adulto', 'piscina', 'Área de lazer', 'operacional'),
            ('Portão da garagem', 'portoes', 'Subsolo', 'alerta'),
        ]
        criados = [
            Equipamento.objects.create(
                condominio=condominio, nome=nome, categoria=categoria,
                localizacao=local, status=status,
            )
            for nome, categoria, local, status in equipamentos
        ]

        ChamadoManutencao.objects.create(
            condominio=condominio,
            equipamento=criados[3],
            titulo='Portão não fecha sozinho',
            descricao='O portão da garagem fica aberto após a passagem do carro.',
            prioridade='alta',
            solicitado_por=morador,
        )

    def _criar_leituras(self, condominio, sindico):
        self.stdout.write('  💧 Registrando leituras...')

        LeituraPiscina.objects.create(
            condominio=condominio, ph=Decimal('7.4'), cloro=Decimal('1.5'),
            alcalinidade=Decimal('100'), dureza_calcica=Decimal('250'),
            temperatura=Decimal('26.5'), registrado_por=sindico,
        )
        reservatorio = Reservatorio.objects.create(
            condominio=condominio, nome='Caixa superior', localizacao='Cobertura',
            capacidade_litros=30000,
        )
        LeituraAgua.objects.create(
            condominio=condominio, reservatorio=reservatorio, nivel=Decimal('85'),
            volume_disponivel=Decimal('25500'), registrado_por=sindico,
        )
        LeituraGas.objects.create(
            condominio=condominio, nivel=Decimal('60'),
            percentual_disponivel=Decimal('60'), registrado_por=sindico,
        )
        EventoEnergia.objects.create(condominio=condominio, status='ok', descricao='Fornecimento normal')
        DadosOcupacao.objects.create(
            condominio=condominio, total_unidades=48, unidades_ocupadas=42,
            media_pessoas_por_unidade=Decimal('2.8'),
        )

    def _criar_documentos(self, condominio, sindico):
        self.stdout.write('  📄 Criando documentos e fornecedores...')

        hoje = timezone.localdate()
        Documento.objects.create(
            condominio=condominio, nome='AVCB', tipo='avcb',
            data_validade=hoje + timedelta(days=20), enviado_por=sindico,
        )
        Documento.objects.create(
            condominio=condominio, nome='Contrato de limpeza', tipo='contrato',
            data_validade=hoje + timedelta(days=300), enviado_por=sindico,
        )
        Fornecedor.objects.create(
            condominio=condominio, nome='Elevadores Sul', categoria='Elevadores',
            telefone='4833330000', whatsapp='48999990000',
        )
        Funcionario.objects.create(
            condominio=condominio, nome='José Zelador', funcao='Zelador',
            departamento='Manutenção', data_admissao=hoje - timedelta(days=800),
            salario_base=Decimal('2500.00'), vale_transporte=Decimal('200.00'),
        )

    def _criar_equipe(self, condominio):
        self.stdout.write('  👷 Criando equipe e modelos de atividade...')

        MembroEquipe.objects.create(
            condominio=condominio, nome='José Zelador', funcao='zelador',
            whatsapp='48988887777', jornada='07:00 - 16:00',
        )
        modelos = [
            ('Verificar bombas', 'Casa de máquinas', 15),
            ('Limpar hall de entrada', 'Térreo', 30),
            ('Recolher lixo reciclável', 'Lixeira', 20),
        ]
        for ordem, (titulo, area, tempo) in enumerate(modelos):
            ModeloAtividade.objects.create(
                condominio=condominio, titulo=titulo, funcao='zelador',
                area=area, tempo_estimado=tempo, ordem=ordem,
            )

    def _criar_mercado(self, condominio):
        self.stdout.write('  🛒 Criando produtos do mini mercado...')

        bebidas = Categoria.objects.create(condominio=condominio, nome='Bebidas', ordem=1)
        mercearia = Categoria.objects.create(condominio=condominio, nome='Mercearia', ordem=2)

        produtos = [
            (bebidas, 'Água mineral 500ml', '1.20', '3.00', 48),
            (bebidas, 'Refrigerante lata', '2.50', '5.50', 24),
            (mercearia, 'Café 500g', '12.00', '19.90', 10),
            (mercearia, 'Biscoito recheado', '1.80', '4.50', 3),
        ]
        for categoria, nome, custo, venda, estoque in produtos:
            Produto.objects.create(
                condominio=condominio, categoria=categoria, nome=nome,
                preco_custo=Decimal(custo), preco_venda=Decimal(venda),
                estoque_atual=estoque,
            )
