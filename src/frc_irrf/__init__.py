"""FRC IRRF - Retenção de IRRF e Cédula C do Fundo de Apoio ao Registro Civil."""

__version__ = "0.1.0"
