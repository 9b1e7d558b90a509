"""Write-side use cases, one package per aggregate."""
