# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

from apps.core.views import health_check
from apps.relatorios.views import dashboard_view

api_patterns = [
    path('', include('apps.core.urls')),
    path('', include('apps.manutencao.urls')),
    path('', include('apps.monitoramento.urls')),
    path('', include('apps.documentos.urls')),
    path('', include('apps.comunicacao.urls')),
    path('', include('apps.rh.urls')),
    path('mercado/', include('apps.mercado.urls')),
    path('equipe/', include('apps.equipe.urls')),
    path('dashboard/', dashboard_view, name='dashboard'),
]

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Monitoramento
    path('health/', health_check, name='health_check'),

    # API JSON e relatórios
    path('api/', include(api_patterns)),
    path('relatorios/', include('apps.relatorios.urls')),
]

# Servir arquivos de mídia em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

    # Debug Toolbar se disponível
    try:
        import debug_toolbar

        urlpatterns = [
                          path('__debug__/', include(debug_toolbar.urls)),
                      ] + urlpatterns
    except ImportError:
        pass

# Customizar títulos do admin
admin.site.site_header = 'Condo Gestão Admin'
admin.site.site_title = 'Condo Gestão'
admin.site.index_title = 'Administração dos Condomínios'
