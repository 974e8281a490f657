# apps/documentos/urls.py

from django.urls import path
from . import views

app_name = 'documentos'

urlpatterns = [
    path('documentos/', views.DocumentoView.as_view(), name='documentos'),
    path('documentos/<int:pk>/', views.DocumentoView.as_view(), name='documento'),
    path('fornecedores/', views.FornecedorView.as_view(), name='fornecedores'),
    path('fornecedores/<int:pk>/', views.FornecedorView.as_view(), name='fornecedor'),
]
