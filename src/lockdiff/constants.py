default_lock_file = "composer.lock"
default_report_name = "report"

# Built-in groups, in report order. Custom groups are placed before "other".
core_group = "core"
core_extensions_group = "core-extensions"
extensions_group = "extensions"
other_group = "other"

core_package_name = "typo3/cms-core"
framework_package_type = "typo3-cms-framework"
extension_package_type = "typo3-cms-extension"

floating_version_marker = "dev-"
short_reference_length = 7

git_timeout_seconds = 60
