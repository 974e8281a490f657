# apps/equipe/forms.py

from apps.core.forms import FormularioCondominio
from .models import ExecucaoProcesso, ListaAtividades, MembroEquipe, ModeloAtividade, Processo


class MembroEquipeForm(FormularioCondominio):

    class Meta:
        model = MembroEquipe
        fields = [
            'nome', 'cpf', 'funcao', 'departamento', 'telefone', 'whatsapp',
            'email', 'jornada', 'data_contratacao', 'status', 'observacoes',
        ]


class ProcessoForm(FormularioCondominio):

    class Meta:
        model = Processo
        fields = [
            'nome', 'descricao', 'categoria', 'frequencia', 'responsavel',
            'blocos', 'andares', 'equipamentos', 'roteiro', 'checklist',
            'duracao_estimada', 'ativo',
        ]

    def clean_blocos(self):
        return self.clean_lista_json('blocos')

    def clean_andares(self):
        return self.clean_lista_json('andares')

    def clean_equipamentos(self):
        return self.clean_lista_json('equipamentos')

    def clean_checklist(self):
        return self.clean_lista_json('checklist')


class ExecucaoProcessoForm(FormularioCondominio):

    class Meta:
        model = ExecucaoProcesso
        fields = ['executado_por', 'status', 'checklist_resultado', 'observacoes']

    def clean_checklist_resultado(self):
        return self.clean_lista_json('checklist_resultado')


class ModeloAtividadeForm(FormularioCondominio):

    class Meta:
        model = ModeloAtividade
        fields = [
            'categoria', 'titulo', 'descricao', 'funcao', 'area', 'instrucoes',
            'equipamentos_necessarios', 'checklist', 'tempo_estimado', 'ordem', 'ativo',
        ]

    def clean_equipamentos_necessarios(self):
        return self.clean_lista_json('equipamentos_necessarios')

    def clean_checklist(self):
        return self.clean_lista_json('checklist')


class ListaAtividadesForm(FormularioCondominio):
    """Cabeçalho da lista; título vazio recebe o padrão na criação"""

    class Meta:
        model = ListaAtividades
        fields = ['membro', 'titulo', 'data_execucao', 'turno', 'prioridade', 'observacoes']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['titulo'].required = False
