# apps/core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('login/', views.login_view, name='login'),
    path('auth/me/', views.me_view, name='me'),

    # === CONDOMÍNIOS ===
    path('condominios/', views.condominios_view, name='condominios'),
    path('condominios/<int:condominio_id>/', views.condominio_detalhe_view, name='condominio_detalhe'),
    path('condominios/<int:condominio_id>/usuarios/', views.condominio_usuarios_view, name='condominio_usuarios'),

    # === VÍNCULOS ===
    path('usuarios/<int:usuario_id>/condominios/', views.usuario_condominios_view, name='usuario_condominios'),
    path('vinculos/', views.vinculo_criar_view, name='vinculo_criar'),
    path('vinculos/<int:vinculo_id>/', views.vinculo_atualizar_view, name='vinculo_atualizar'),
    path('vinculos/<int:usuario_id>/<int:condominio_id>/', views.vinculo_remover_view, name='vinculo_remover'),

    # === MÓDULOS ===
    path('permissoes-modulos/', views.permissoes_modulos_view, name='permissoes_modulos'),
    path('permissoes-modulos/<str:chave>/', views.permissao_modulo_atualizar_view, name='permissao_modulo'),
]
