"""
App Documentos - documentação legal do condomínio (AVCB, alvarás,
contratos...) e cadastro de fornecedores.
"""
