"""Tests for in-tree to CSI driver name translation."""

from volsched.schedule.csi_translation import CSITranslator


def test_default_table_translates_known_plugins() -> None:
    translator = CSITranslator()

    assert translator.translate("kubernetes.io/aws-ebs") == ("ebs.csi.aws.com", True)
    assert translator.translate("kubernetes.io/gce-pd") == ("pd.csi.storage.gke.io", True)
    assert translator.is_in_tree("kubernetes.io/azure-disk")


def test_unknown_name_passes_through() -> None:
    translator = CSITranslator()

    assert translator.translate("ebs.csi.aws.com") == ("ebs.csi.aws.com", False)
    assert not translator.is_in_tree("ebs.csi.aws.com")


def test_empty_mapping_passes_everything_through() -> None:
    translator = CSITranslator({})

    assert translator.translate("kubernetes.io/aws-ebs") == ("kubernetes.io/aws-ebs", False)


def test_injected_mapping_replaces_default() -> None:
    translator = CSITranslator({"example.com/legacy": "modern.example.com"})

    assert translator.translate("example.com/legacy") == ("modern.example.com", True)
    assert translator.translate("kubernetes.io/aws-ebs") == ("kubernetes.io/aws-ebs", False)
