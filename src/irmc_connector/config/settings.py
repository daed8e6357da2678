class Settings:
    class Server:
        ACCEPT_HEADER = "application/json"
        AUTH_SCHEME = "Basic"

        # seconds
        TIMEOUT = 100
        # firmware images are large and the controller is slow to accept them
        UPLOAD_TIMEOUT = 10 * 60

        FOLLOW_REDIRECTS = True

    class Upload:
        FIELD_NAME = "data"
        CONTENT_TYPE = "multipart/form-data"

    class Redfish:
        SCHEME = "https"
        ROOT = "/redfish/v1"
        SYSTEM = ROOT + "/Systems/{system_id}"
        FIRMWARE_UPDATE = ROOT + "/Managers/iRMC/Actions/Oem.FTSManager.FWUpdate"
        MANAGER_RESET = ROOT + "/Managers/iRMC/Actions/Manager.Reset"
