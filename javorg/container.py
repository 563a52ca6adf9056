"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI : configuration,
adaptateurs (fichiers, JavDB, images) et services du pipeline.
"""

from dependency_injector import containers, providers

from .adapters.api.image_downloader import HttpImageDownloader
from .adapters.api.javdb_client import JavDBClient
from .adapters.file_system import FileSystemAdapter
from .config import Settings
from .core.value_objects.scan_rules import ScanRules
from .services.artifacts import ArtifactGenerator
from .services.pipeline import PipelineService
from .services.relocator import RelocatorService
from .services.resolver import MetadataResolver
from .services.scanner import ScannerService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        pipeline = container.pipeline_service()
        result = pipeline.run(PipelineConfig(...))

    Les tests peuvent substituer le service de metadonnees :
        container.metadata_service.override(providers.Object(fake_service))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Regles de scan derivees de la configuration
    scan_rules = providers.Singleton(ScanRules.from_settings, config)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)

    metadata_service = providers.Singleton(
        JavDBClient,
        base_url=config.provided.javdb_url,
        user_agent=config.provided.user_agent,
        timeout=config.provided.http_timeout,
    )

    image_downloader = providers.Singleton(
        HttpImageDownloader,
        user_agent=config.provided.user_agent,
        timeout=config.provided.http_timeout,
        referer=config.provided.javdb_url,
    )

    # Services
    scanner_service = providers.Factory(
        ScannerService,
        file_system=file_system,
        rules=scan_rules,
    )
    resolver = providers.Factory(
        MetadataResolver,
        service=metadata_service,
    )
    artifact_generator = providers.Factory(
        ArtifactGenerator,
        downloader=image_downloader,
    )
    relocator_service = providers.Factory(
        RelocatorService,
        file_system=file_system,
    )

    pipeline_service = providers.Factory(
        PipelineService,
        scanner=scanner_service,
        resolver=resolver,
        artifacts=artifact_generator,
        relocator=relocator_service,
    )
