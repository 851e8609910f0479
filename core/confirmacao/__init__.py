from .fluxo_confirmacao import EstadoConfirmacao, FluxoConfirmacao, Ocioso, Pendente

__all__ = ["EstadoConfirmacao", "FluxoConfirmacao", "Ocioso", "Pendente"]

# English aliases
ConfirmationWorkflow = FluxoConfirmacao
__all__ += ["ConfirmationWorkflow"]
