# apps/comunicacao/forms.py

from apps.core.forms import FormularioCondominio
from .models import Comunicado


class ComunicadoForm(FormularioCondominio):
    """Formulário de comunicado"""

    class Meta:
        model = Comunicado
        fields = ['titulo', 'conteudo', 'prioridade', 'fotos', 'expira_em']

    def clean_fotos(self):
        return self.clean_lista_json('fotos')
